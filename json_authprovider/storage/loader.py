"""
Users file loader.

Responsibilities:
    - Read the whole users file from disk
    - Parse it as a JSON array of credential records

The file format is a JSON array with one object per identity:

    [
      {
        "id": {"idp": "localhost", "opaque_id": "4c510ada", "type": 1},
        "username": "einstein",
        "secret": "relativity",
        "mail": "einstein@example.org",
        "mail_verified": true,
        "display_name": "Albert Einstein",
        "groups": ["sailing-lovers", "physics-lovers"],
        "uid_number": 123,
        "gid_number": 987,
        "opaque": {"map": {"quota": {"decoder": "plain", "value": "10G"}}}
      }
    ]

Unknown fields are ignored and missing fields take their zero value.
"""

import json
from typing import List, Union

from pydantic import ValidationError

from ..errors import CredentialsParseError, CredentialsReadError
from ..models import Credentials


def read_credentials_file(path: str) -> bytes:
    """
    Read the raw content of a users file.

    Raises:
        CredentialsReadError: If the file is missing, unreadable or a directory.
    """
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        raise CredentialsReadError(path, exc.strerror or str(exc)) from exc


def parse_credentials(raw: Union[bytes, str]) -> List[Credentials]:
    """
    Parse users file content into credential records, preserving file order.

    Args:
        raw: File content. A JSON ``null`` is an empty list.

    Returns:
        List[Credentials]: One record per array element.

    Raises:
        CredentialsParseError: On invalid JSON, a non-array top level or an
            element that is not a valid credential record.
    """
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CredentialsParseError(f"invalid credentials JSON: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise CredentialsParseError(
            f"credentials file must contain a JSON array, got {type(data).__name__}"
        )

    records: List[Credentials] = []
    for position, item in enumerate(data):
        try:
            records.append(Credentials.model_validate(item))
        except ValidationError as exc:
            raise CredentialsParseError(f"invalid credential record at index {position}: {exc}") from exc
    return records


def load_credentials(path: str) -> List[Credentials]:
    """Read and parse a users file."""
    return parse_credentials(read_credentials_file(path))
