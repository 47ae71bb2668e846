"""
Scope encoding: turns a role into the authorization grants attached to an
authenticated identity.
"""

from .scope import (
    LIGHTWEIGHT_SCOPE_KEY,
    OWNER_SCOPE_KEY,
    add_lightweight_account_scope,
    add_owner_scope,
)

__all__ = [
    "LIGHTWEIGHT_SCOPE_KEY",
    "OWNER_SCOPE_KEY",
    "add_lightweight_account_scope",
    "add_owner_scope",
]
