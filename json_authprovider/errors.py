"""
Error taxonomy for the JSON auth provider.

Load errors (ConfigError, CredentialsReadError, CredentialsParseError) are
fatal to startup. InvalidCredentials and ScopeDerivationError are per-call
outcomes of `authenticate`. Nothing here is logged or retried by the core;
every error goes straight back to the caller.
"""


class AuthProviderError(Exception):
    """Base class for all provider errors."""


class ConfigError(AuthProviderError, ValueError):
    """The configuration value has the wrong shape."""


class CredentialsReadError(AuthProviderError, OSError):
    """The credentials file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"error reading credentials file {path!r}: {reason}")
        self.path = path
        self.reason = reason


class CredentialsParseError(AuthProviderError, ValueError):
    """The credentials file is not a valid list of credential records."""


class InvalidCredentials(AuthProviderError):
    """
    Unknown username or wrong secret.

    Both cases raise the exact same error so a caller cannot tell which one
    happened. Two instances for the same username compare equal.
    """

    def __init__(self, username: str):
        super().__init__(f"invalid credentials: {username}")
        self.username = username

    def __eq__(self, other):
        if not isinstance(other, InvalidCredentials):
            return NotImplemented
        return type(self) is type(other) and self.username == other.username

    def __hash__(self):
        return hash((type(self), self.username))


class ScopeDerivationError(AuthProviderError):
    """The scope-encoding collaborator could not produce a scope set."""
