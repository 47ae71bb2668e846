"""
Host API module for the JSON auth provider.

Responsibilities:
    - Expose the manager's two operations to a host process:
        POST /configure     -> CredentialManager.configure
        POST /authenticate  -> CredentialManager.authenticate
    - Guard /configure with the host bearer token (AUTHPROVIDER_HOST_TOKEN)
    - Provide a Basic-auth protected /whoami for checking credentials
    - Optionally verify the plugin handshake cookie before serving

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The manager is injected (or created fresh) per app and kept on
      `app.state.auth_manager`, where the auth dependencies find it.
    - When AUTHPROVIDER_USERS is set, the users file is loaded at startup.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Body, Depends, FastAPI

from authapi.dependencies import get_auth_manager, get_current_user, require_host
from authapi.handshake import verify_handshake
from authapi.schemas import AuthenticateRequest, AuthenticateResponse, ConfigureResponse
from authapi.service import authenticate_user, configure_manager
from json_authprovider import BaseAuthManager, CredentialManager
from json_authprovider.config import settings
from json_authprovider.models import User


def _setup_logging() -> None:
    # basic console logging unless the host already configured it
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.getLogger("json_authprovider").setLevel(level)


def create_app(
    manager: Optional[BaseAuthManager] = None,
    enforce_handshake: Optional[bool] = None,
    host_token: Optional[str] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        manager (Optional[BaseAuthManager]): Manager to serve; a fresh
            CredentialManager when omitted.
        enforce_handshake (Optional[bool]): Require the plugin handshake
            cookie. Defaults to settings.ENFORCE_HANDSHAKE.
        host_token (Optional[str]): Bearer token required by /configure.
            Defaults to settings.HOST_TOKEN; /configure is refused when empty.

    Returns:
        FastAPI: A configured application with its own manager instance.

    Raises:
        HandshakeError: If the handshake is enforced and the cookie is wrong.
        AuthProviderError: If the startup users file cannot be loaded.
    """
    _setup_logging()
    log = logging.getLogger("json_authprovider.host")

    if enforce_handshake is None:
        enforce_handshake = settings.ENFORCE_HANDSHAKE
    if enforce_handshake:
        verify_handshake()

    app = FastAPI(
        title="JSON Auth Provider",
        description="Username/secret authentication against a static JSON users file",
        docs_url="/docs",
    )

    auth_manager = manager if manager is not None else CredentialManager()
    app.state.auth_manager = auth_manager
    app.state.host_token = host_token if host_token is not None else settings.HOST_TOKEN

    if settings.USERS_PATH:
        auth_manager.configure({"users": settings.USERS_PATH})
        log.info("bootstrapped users from %s", settings.USERS_PATH)

    # Health check
    @app.get("/health")
    def health(mgr: BaseAuthManager = Depends(get_auth_manager)) -> Dict[str, Any]:
        return {"status": "ok", "loaded": bool(getattr(mgr, "loaded", False))}

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.post("/configure", response_model=ConfigureResponse, dependencies=[Depends(require_host)])
    def configure(
        config: Any = Body(None),
        mgr: BaseAuthManager = Depends(get_auth_manager),
    ) -> ConfigureResponse:
        """
        (Re)load the manager from a host configuration object.

        Host-only: requires the host bearer token.

        Returns:
            ConfigureResponse: Status and number of indexed users.
        """
        configure_manager(mgr, config)
        users = len(getattr(mgr, "credentials", ()))
        return ConfigureResponse(status="configured", users=users)

    @app.post("/authenticate", response_model=AuthenticateResponse)
    def authenticate(
        req: AuthenticateRequest,
        mgr: BaseAuthManager = Depends(get_auth_manager),
    ) -> AuthenticateResponse:
        """
        Authenticate a username/secret pair.

        Returns:
            AuthenticateResponse: The user identity and its scopes.

        Raises:
            HTTPException: 401 on invalid credentials.
        """
        user, scopes = authenticate_user(mgr, req.username, req.secret)
        return AuthenticateResponse(user=user, scopes=scopes)

    @app.get("/whoami", response_model=User)
    def whoami(user: User = Depends(get_current_user)) -> User:
        return user

    return app


# `uvicorn main:app` and `from main import app` keep working.
app = create_app()
