"""
Scope builders.

Both builders grant a role on the storage root ("/"), encoded as a JSON
reference, under a well-known key of the scope set:

    add_owner_scope                 -> scopes["user"]        (role OWNER)
    add_lightweight_account_scope   -> scopes["lightweight"] (caller's role)

They take an optional existing scope set, add their entry and return the
updated set. Passing None starts from an empty set.
"""

import json
from typing import Any, Dict, Optional

from ..errors import ScopeDerivationError
from ..models import OpaqueEntry, Role, Scope, ScopeSet

OWNER_SCOPE_KEY = "user"
LIGHTWEIGHT_SCOPE_KEY = "lightweight"

_ROOT_REFERENCE: Dict[str, Any] = {"path": "/"}


def _encode_resource(resource: Dict[str, Any]) -> OpaqueEntry:
    try:
        value = json.dumps(resource, sort_keys=True)
    except (TypeError, ValueError) as exc:
        raise ScopeDerivationError(f"error encoding scope resource: {exc}") from exc
    return OpaqueEntry(decoder="json", value=value.encode("utf-8"))


def _add_scope(key: str, role: Role, scopes: Optional[ScopeSet]) -> ScopeSet:
    if not isinstance(role, Role):
        raise ScopeDerivationError(f"invalid role for scope {key!r}: {role!r}")
    resource = _encode_resource(_ROOT_REFERENCE)
    if scopes is None:
        scopes = {}
    scopes[key] = Scope(resource=resource, role=role)
    return scopes


def add_owner_scope(scopes: Optional[ScopeSet] = None) -> ScopeSet:
    """Grant full ownership of the user's resources."""
    return _add_scope(OWNER_SCOPE_KEY, Role.OWNER, scopes)


def add_lightweight_account_scope(role: Role, scopes: Optional[ScopeSet] = None) -> ScopeSet:
    """Grant `role` to a lightweight account."""
    return _add_scope(LIGHTWEIGHT_SCOPE_KEY, role, scopes)
