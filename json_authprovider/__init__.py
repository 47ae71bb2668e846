"""
json_authprovider package initializer.

Authenticates username/secret pairs against a static JSON users file and
returns the user identity with its authorization scopes.
"""

from . import manager
from . import scope
from . import storage
from .errors import (
    AuthProviderError,
    ConfigError,
    CredentialsParseError,
    CredentialsReadError,
    InvalidCredentials,
    ScopeDerivationError,
)
from .manager import BaseAuthManager, CredentialManager

__all__ = [
    "manager",
    "scope",
    "storage",
    "AuthProviderError",
    "BaseAuthManager",
    "ConfigError",
    "CredentialManager",
    "CredentialsParseError",
    "CredentialsReadError",
    "InvalidCredentials",
    "ScopeDerivationError",
]
