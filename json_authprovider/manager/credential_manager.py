"""
CredentialManager: file-backed username/secret authentication.

Responsibilities:
    - Load a users file named by the host configuration into an index
    - Authenticate username/secret pairs against the current index
    - Derive the authorization scopes of an authenticated identity

Design notes:
    - The index is immutable. `configure` builds a complete new index and
      publishes it with a single attribute assignment, so a concurrent
      `authenticate` sees either the old index or the new one, never a mix.
      Loads are serialized by a lock; reads never take it.
    - A failed read/parse leaves the manager with an empty index: every
      authentication fails until a later load succeeds.
    - Unknown username and wrong secret raise the same InvalidCredentials.
    - Scope derivation is picked from a mapping of user type to builder;
      types without an entry get the full owner scope.
"""

import hmac
import logging
import threading
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..config import parse_config
from ..errors import AuthProviderError, InvalidCredentials
from ..models import Credentials, Role, ScopeSet, User, UserType
from ..scope import add_lightweight_account_scope, add_owner_scope
from ..storage.index import EMPTY_INDEX, CredentialIndex
from ..storage.loader import load_credentials
from .base import BaseAuthManager

logger = logging.getLogger(__name__)

ScopeBuilder = Callable[[], ScopeSet]

SCOPE_BUILDERS: Dict[UserType, ScopeBuilder] = {
    UserType.LIGHTWEIGHT: lambda: add_lightweight_account_scope(Role.OWNER, None),
}


def _owner_scope() -> ScopeSet:
    return add_owner_scope(None)


def _secrets_match(stored: str, supplied: str) -> bool:
    # surrogatepass keeps the compare total over every str, lone surrogates included
    return hmac.compare_digest(
        stored.encode("utf-8", "surrogatepass"),
        supplied.encode("utf-8", "surrogatepass"),
    )


class CredentialManager(BaseAuthManager):
    """
    Authenticates users from a static JSON users file.

    The manager starts unloaded (empty index) and becomes usable after the
    first successful `configure`.
    """

    def __init__(self, scope_builders: Optional[Dict[UserType, ScopeBuilder]] = None):
        self._credentials: CredentialIndex = EMPTY_INDEX
        self._load_lock = threading.Lock()
        self._scope_builders = dict(SCOPE_BUILDERS if scope_builders is None else scope_builders)

    # ---------------------------------------------------------------------
    # State
    # ---------------------------------------------------------------------
    @property
    def credentials(self) -> CredentialIndex:
        """The currently published index."""
        return self._credentials

    @property
    def loaded(self) -> bool:
        return self._credentials is not EMPTY_INDEX

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------
    def configure(self, config: Optional[Mapping[str, Any]]) -> None:
        """
        Load (or reload) the users file named by `config["users"]`.

        Args:
            config: Untyped host configuration. An empty or missing `users`
                path falls back to the default users file.

        Raises:
            ConfigError: If `config` is malformed; the current index is kept.
            CredentialsReadError: If the users file cannot be read.
            CredentialsParseError: If the users file is not a valid record list.
        """
        conf = parse_config(config)
        with self._load_lock:
            try:
                records = load_credentials(conf.users)
            except AuthProviderError:
                self._credentials = EMPTY_INDEX
                raise
            self._credentials = CredentialIndex.from_records(records)
        logger.info("loaded %d credentials from %s", len(self._credentials), conf.users)

    def authenticate(self, username: str, secret: str) -> Tuple[User, ScopeSet]:
        """
        Authenticate a username/secret pair.

        Args:
            username: Exact, case-sensitive username.
            secret: Shared secret, compared for exact equality.

        Returns:
            Tuple[User, ScopeSet]: The identity (without secret) and its scopes.

        Raises:
            InvalidCredentials: If the user is unknown or the secret is wrong.
            ScopeDerivationError: If the scopes cannot be built.
        """
        # single read of the published index
        index = self._credentials
        record = index.lookup(username)
        if record is None or not _secrets_match(record.secret, secret):
            logger.debug("authentication failed for %s", username)
            raise InvalidCredentials(username)

        scopes = self.derive_scopes(record)
        logger.debug("authenticated %s", username)
        return record.to_user(), scopes

    def derive_scopes(self, record: Credentials) -> ScopeSet:
        builder = self._scope_builders.get(record.user_type, _owner_scope)
        return builder()
