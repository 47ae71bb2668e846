"""
Unit tests for the credential and identity models.
"""

import pytest
from pydantic import ValidationError

from json_authprovider.models import Credentials, User, UserId, UserType


@pytest.mark.parametrize(
    "raw,expected",
    [
        (7, UserType.LIGHTWEIGHT),
        ("USER_TYPE_LIGHTWEIGHT", UserType.LIGHTWEIGHT),
        ("lightweight", UserType.LIGHTWEIGHT),
        ("Primary", UserType.PRIMARY),
        (1, UserType.PRIMARY),
        (None, UserType.INVALID),
    ],
)
def test_user_type_accepts_codes_and_names(raw, expected):
    assert UserId(type=raw).type is expected


@pytest.mark.parametrize("raw", [99, -1, 1234])
def test_unknown_numeric_user_type_is_kept_as_int(raw):
    user_type = UserId(type=raw).type
    assert user_type == raw
    assert not isinstance(user_type, UserType)


@pytest.mark.parametrize("raw", ["USER_TYPE_ROBOT", True, 1.5])
def test_user_type_rejects_unknown_values(raw):
    with pytest.raises(ValidationError):
        UserId(type=raw)


def test_missing_fields_take_zero_values():
    rec = Credentials.model_validate({"username": "bob"})
    assert rec.id is None
    assert rec.mail == "" and rec.display_name == "" and rec.secret == ""
    assert rec.mail_verified is False
    assert rec.groups == []
    assert rec.uid_number == 0 and rec.gid_number == 0
    assert rec.opaque is None
    assert rec.user_type is UserType.INVALID


def test_nulls_are_treated_as_missing():
    rec = Credentials.model_validate(
        {"username": "bob", "groups": None, "uid_number": None, "mail_verified": None, "secret": None}
    )
    assert rec.groups == [] and rec.uid_number == 0 and rec.mail_verified is False and rec.secret == ""


def test_unknown_fields_are_ignored():
    rec = Credentials.model_validate({"username": "bob", "shell": "/bin/zsh", "id": {"type": 1, "color": "red"}})
    assert not hasattr(rec, "shell")
    assert rec.user_type is UserType.PRIMARY


def test_opaque_map_is_read_by_its_wire_name():
    rec = Credentials.model_validate(
        {"username": "bob", "opaque": {"map": {"quota": {"decoder": "plain", "value": "MUc="}}}}
    )
    assert rec.opaque.entries["quota"].value == b"1G"
    assert rec.opaque.model_dump(by_alias=True) == {"map": {"quota": {"decoder": "plain", "value": "MUc="}}}


def test_to_user_drops_the_secret():
    rec = Credentials.model_validate(
        {"id": {"opaque_id": "u1", "type": 1}, "username": "bob", "secret": "s3cr3t", "groups": ["a", "b"]}
    )
    user = rec.to_user()
    assert type(user) is User
    assert "secret" not in user.model_dump()
    assert user.username == "bob" and user.groups == ["a", "b"] and user.id.opaque_id == "u1"


def test_records_are_frozen():
    rec = Credentials.model_validate({"username": "bob", "secret": "x"})
    with pytest.raises(ValidationError):
        rec.secret = "y"


def test_nested_nulls_are_treated_as_missing():
    rec = Credentials.model_validate(
        {
            "username": "bob",
            "id": {"idp": None, "opaque_id": "x", "type": None},
            "opaque": {"map": {"k": {"decoder": None, "value": None}}},
        }
    )
    assert rec.id.idp == "" and rec.id.opaque_id == "x"
    assert rec.id.type is UserType.INVALID
    assert rec.opaque.entries["k"].decoder == ""
    assert rec.opaque.entries["k"].value == b""


def test_opaque_value_must_be_base64():
    with pytest.raises(ValidationError, match="not valid base64"):
        Credentials.model_validate({"username": "bob", "opaque": {"map": {"k": {"value": "10G"}}}})
