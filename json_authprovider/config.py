"""
Runtime configuration for the JSON auth provider
================================================

Two kinds of configuration live here:

1. Process settings read from environment variables (only here), exposed as a
   stable `settings` object for the rest of the codebase. Avoid reading env
   vars anywhere else; import from this module instead.

   - AUTHPROVIDER_USERS             : optional users file loaded by the host app at startup
   - AUTHPROVIDER_LOG_LEVEL         : log level for the provider loggers (default "INFO")
   - AUTHPROVIDER_ENFORCE_HANDSHAKE : "1" to require the plugin handshake cookie
   - AUTHPROVIDER_HOST_TOKEN        : bearer token the host must present to /configure

2. Manager configuration: the untyped mapping handed to
   `CredentialManager.configure()` by the host. It has one recognized key,
   `users` (path to the credentials JSON file). Unknown keys are ignored and
   an empty/absent path falls back to DEFAULT_USERS_PATH.
"""

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from .errors import ConfigError

DEFAULT_USERS_PATH = "/etc/revad/users.json"


class ManagerConfig(BaseModel):
    """Decoded manager configuration."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Path to a file containing a JSON array of credential records
    users: StrictStr = ""

    def with_defaults(self) -> "ManagerConfig":
        if self.users:
            return self
        return self.model_copy(update={"users": DEFAULT_USERS_PATH})


def parse_config(raw: Any) -> ManagerConfig:
    """
    Decode the host-supplied configuration mapping.

    Args:
        raw: Untyped configuration value. ``None`` is treated as an empty mapping.

    Returns:
        ManagerConfig: Decoded configuration with the default path applied.

    Raises:
        ConfigError: If the value is not a mapping or `users` is not a string.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"error decoding conf: expected a mapping, got {type(raw).__name__}")
    try:
        return ManagerConfig.model_validate(dict(raw)).with_defaults()
    except ValidationError as exc:
        raise ConfigError(f"error decoding conf: {exc.errors()[0]['msg']}") from exc


class _Settings:
    # -------- Bootstrap --------
    USERS_PATH: str = os.getenv("AUTHPROVIDER_USERS", "")

    # -------- Logging --------
    LOG_LEVEL: str = os.getenv("AUTHPROVIDER_LOG_LEVEL", "INFO").strip().upper()

    # -------- Plugin handshake --------
    ENFORCE_HANDSHAKE: bool = os.getenv("AUTHPROVIDER_ENFORCE_HANDSHAKE", "") == "1"

    # -------- Host API --------
    # /configure is refused while this is empty
    HOST_TOKEN: str = os.getenv("AUTHPROVIDER_HOST_TOKEN", "")


settings = _Settings()
