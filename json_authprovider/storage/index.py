"""
In-memory credential index.

A read-only mapping username -> Credentials. An index is built once from a
list of records and never changes afterwards; reloading means building a new
index and swapping it in. Lookup is an exact, case-sensitive match.

Duplicate usernames follow last-write-wins: a later record replaces an
earlier one with the same username.
"""

from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional

from ..models import Credentials


class CredentialIndex(Mapping):
    def __init__(self, entries: Optional[Dict[str, Credentials]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_records(cls, records: Iterable[Credentials]) -> "CredentialIndex":
        entries: Dict[str, Credentials] = {}
        for record in records:
            entries[record.username] = record
        return cls(entries)

    def lookup(self, username: str) -> Optional[Credentials]:
        return self._entries.get(username)

    def __getitem__(self, username: str) -> Credentials:
        return self._entries[username]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CredentialIndex(users={len(self)})"


EMPTY_INDEX = CredentialIndex()
