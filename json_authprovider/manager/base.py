"""
Base interface for auth managers.

Purpose:
    Define the narrow contract a host calls across its plugin boundary:
    configure once, then authenticate per request. Keeping it to these two
    methods lets the core be driven in-process by tests or by any transport.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Tuple

from ..models import ScopeSet, User


class BaseAuthManager(ABC):
    """Abstract base class for auth managers."""

    @abstractmethod  # pragma: no cover
    def configure(self, config: Optional[Mapping[str, Any]]) -> None:
        """
        Load the manager's state from an untyped configuration mapping.

        Raises:
            AuthProviderError: If the configuration or the data it points to is invalid.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def authenticate(self, username: str, secret: str) -> Tuple[User, ScopeSet]:
        """
        Verify a username/secret pair.

        Returns:
            Tuple[User, ScopeSet]: The identity and its authorization scopes.

        Raises:
            InvalidCredentials: On unknown username or wrong secret.
        """
        raise NotImplementedError
