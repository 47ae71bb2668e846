"""
Unit tests for reading and parsing users files.
"""

import os

import pytest

from json_authprovider.errors import CredentialsParseError, CredentialsReadError
from json_authprovider.storage.loader import load_credentials, parse_credentials, read_credentials_file


def test_parse_preserves_file_order():
    records = parse_credentials(b'[{"username": "a"}, {"username": "b"}, {"username": "a", "secret": "2"}]')
    assert [r.username for r in records] == ["a", "b", "a"]
    assert records[2].secret == "2"


def test_parse_accepts_text_and_null():
    assert parse_credentials("[]") == []
    assert parse_credentials("null") == []


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b'[{"username": "a"',
        b"\x80abc",
    ],
)
def test_invalid_json_is_a_parse_error(raw):
    with pytest.raises(CredentialsParseError, match="invalid credentials JSON"):
        parse_credentials(raw)


@pytest.mark.parametrize("raw", [b'{"username": "a"}', b'"users"', b"42"])
def test_non_array_top_level_is_a_parse_error(raw):
    with pytest.raises(CredentialsParseError, match="must contain a JSON array"):
        parse_credentials(raw)


@pytest.mark.parametrize(
    "raw",
    [
        b'[{"username": "a"}, "b"]',
        b'[{"username": ["a"]}]',
        b'[{"username": "a", "uid_number": "lots"}]',
        b'[{"username": "a", "id": {"type": "robot"}}]',
    ],
)
def test_bad_record_is_a_parse_error(raw):
    with pytest.raises(CredentialsParseError, match="invalid credential record"):
        parse_credentials(raw)


def test_read_missing_file(tmp_path):
    path = str(tmp_path / "nope.json")
    with pytest.raises(CredentialsReadError) as excinfo:
        read_credentials_file(path)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value, OSError)


def test_read_directory_is_a_read_error(tmp_path):
    with pytest.raises(CredentialsReadError):
        read_credentials_file(str(tmp_path))


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores file permissions")
def test_read_unreadable_file(write_users):
    path = write_users([])
    os.chmod(path, 0)
    try:
        with pytest.raises(CredentialsReadError):
            read_credentials_file(path)
    finally:
        os.chmod(path, 0o600)


def test_load_credentials(users_file):
    records = load_credentials(users_file)
    assert [r.username for r in records] == ["einstein", "marie", "richard"]
