"""
Data model for the JSON auth provider.

Credentials
    One provisioned identity as stored in the users file, secret included.
User
    The identity handed back to the caller after a successful authentication
    (the credential record without its secret).
Scope / ScopeSet
    Authorization grants attached to an authenticated identity.

All models ignore unknown fields and give missing fields their zero value, so
a sparse users file still loads. Models are frozen once built.
"""

from __future__ import annotations

import base64
import binascii
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class UserType(IntEnum):
    """Identity type tag carried in a user id."""

    INVALID = 0
    PRIMARY = 1
    SECONDARY = 2
    SERVICE = 3
    APPLICATION = 4
    GUEST = 5
    FEDERATED = 6
    LIGHTWEIGHT = 7
    SPACE_OWNER = 8

    @classmethod
    def parse(cls, value: Any) -> Union["UserType", int]:
        """
        Accept the integer code, the full name ("USER_TYPE_LIGHTWEIGHT")
        or the short name ("lightweight", any case).

        Integer codes without a member are passed through as plain ints.
        """
        if isinstance(value, UserType):
            return value
        if isinstance(value, bool):
            raise ValueError(f"invalid user type: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name.startswith("USER_TYPE_"):
                name = name[len("USER_TYPE_"):]
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"invalid user type: {value!r}") from None
        raise ValueError(f"invalid user type: {value!r}")


class Role(str, Enum):
    """Role granted by a scope."""

    INVALID = "ROLE_INVALID"
    UNKNOWN = "ROLE_UNKNOWN"
    LEGACY = "ROLE_LEGACY"
    VIEWER = "ROLE_VIEWER"
    EDITOR = "ROLE_EDITOR"
    FILE_EDITOR = "ROLE_FILE_EDITOR"
    COOWNER = "ROLE_COOWNER"
    UPLOADER = "ROLE_UPLOADER"
    OWNER = "ROLE_OWNER"
    DENIED = "ROLE_DENIED"


class _Frozen(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null means "missing": the field's zero value applies
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class OpaqueEntry(_Frozen):
    """
    A single encoded value: how to decode it and the payload itself.

    On the wire `value` is base64 text; in memory it is raw bytes.
    """

    decoder: str = ""
    value: bytes = b""

    @field_validator("value", mode="before")
    @classmethod
    def _decode_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise ValueError(f"opaque value is not valid base64: {exc}") from None
        return value

    @field_serializer("value")
    def _encode_value(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")


class Opaque(_Frozen):
    """Open-ended attribute bag."""

    entries: Dict[str, OpaqueEntry] = Field(default_factory=dict, alias="map")


class UserId(_Frozen):
    idp: str = ""
    opaque_id: str = ""
    # known codes become UserType members, unknown codes stay plain ints
    type: Union[UserType, int] = UserType.INVALID

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Union[UserType, int]:
        if value is None:
            return UserType.INVALID
        return UserType.parse(value)


class User(_Frozen):
    """Authenticated identity returned to the caller."""

    id: Optional[UserId] = None
    username: str = ""
    mail: str = ""
    mail_verified: bool = False
    display_name: str = ""
    groups: List[str] = Field(default_factory=list)
    uid_number: int = 0
    gid_number: int = 0
    opaque: Optional[Opaque] = None


class Credentials(User):
    """A credential record: a user plus the shared secret it authenticates with."""

    secret: str = ""

    @property
    def user_type(self) -> Union[UserType, int]:
        return self.id.type if self.id is not None else UserType.INVALID

    def to_user(self) -> User:
        """Build the caller-facing identity (everything but the secret)."""
        return User(
            id=self.id,
            username=self.username,
            mail=self.mail,
            mail_verified=self.mail_verified,
            display_name=self.display_name,
            groups=list(self.groups),
            uid_number=self.uid_number,
            gid_number=self.gid_number,
            opaque=self.opaque,
        )


class Scope(_Frozen):
    """One authorization grant: an encoded resource and the role held on it."""

    resource: OpaqueEntry
    role: Role


ScopeSet = Dict[str, Scope]
