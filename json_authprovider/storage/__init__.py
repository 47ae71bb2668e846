"""
Credential storage: reading the users file and indexing its records.
"""

from .index import CredentialIndex
from .loader import load_credentials, parse_credentials, read_credentials_file

__all__ = ["CredentialIndex", "load_credentials", "parse_credentials", "read_credentials_file"]
