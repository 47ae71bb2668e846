"""
FastAPI dependency functions for authentication.

These can be used in routes with Depends() to protect endpoints. The manager
and the host token are taken from `app.state`, set by the app factory.
"""

import hmac
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBasic, HTTPBasicCredentials, HTTPBearer

from json_authprovider import BaseAuthManager
from json_authprovider.models import User

from .service import authenticate_user

# HTTP Basic authentication scheme
security = HTTPBasic()
# Bearer scheme for host-only routes; errors are raised by require_host
host_bearer = HTTPBearer(auto_error=False)


def get_auth_manager(request: Request) -> BaseAuthManager:
    return request.app.state.auth_manager


def get_current_user(
    credentials: HTTPBasicCredentials = Depends(security),
    manager: BaseAuthManager = Depends(get_auth_manager),
) -> User:
    """
    Dependency that retrieves and validates the current user.

    Args:
        credentials (HTTPBasicCredentials): Automatically provided by FastAPI.
        manager (BaseAuthManager): The app's auth manager.

    Returns:
        User: The authenticated identity.
    """
    user, _ = authenticate_user(manager, credentials.username, credentials.password)
    return user


def require_host(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(host_bearer),
) -> None:
    """
    Dependency guarding host-only routes with the configured host token.

    Raises:
        HTTPException: 403 if no host token is configured, 401 if the bearer
            token is missing or wrong.
    """
    expected = request.app.state.host_token
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Host API disabled: no host token configured",
        )
    supplied = credentials.credentials if credentials is not None else ""
    if not hmac.compare_digest(
        expected.encode("utf-8", "surrogatepass"),
        supplied.encode("utf-8", "surrogatepass"),
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid host token",
            headers={"WWW-Authenticate": "Bearer"},
        )
