"""
Translation between provider errors and HTTP responses.

The core raises typed errors; this module maps them to HTTPException so the
routes stay thin. Authentication failures always produce the same 401 body,
whatever the cause.
"""

import logging
from typing import Any, Tuple

from fastapi import HTTPException, status

from json_authprovider import (
    BaseAuthManager,
    ConfigError,
    CredentialsParseError,
    CredentialsReadError,
    InvalidCredentials,
    ScopeDerivationError,
)
from json_authprovider.models import ScopeSet, User

logger = logging.getLogger(__name__)


def authenticate_user(manager: BaseAuthManager, username: str, secret: str) -> Tuple[User, ScopeSet]:
    """
    Authenticate a user through the manager.

    Raises:
        HTTPException: 401 on invalid credentials, 500 if scopes cannot be built.
    """
    try:
        return manager.authenticate(username, secret)
    except InvalidCredentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    except ScopeDerivationError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc


def configure_manager(manager: BaseAuthManager, config: Any) -> None:
    """
    Configure the manager.

    Raises:
        HTTPException: 400 on a bad configuration or users file, 500 if the
            users file cannot be read.
    """
    try:
        manager.configure(config)
    except ConfigError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except CredentialsParseError as exc:
        # record contents stay in the log, not in the response
        logger.warning("rejected users file: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid credentials file") from exc
    except CredentialsReadError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
