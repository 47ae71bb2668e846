"""
Global pytest fixtures for the JSON auth provider test suite.

Responsibilities:
    - Provide users files written to a temporary directory
    - Provide a CredentialManager loaded from the sample users file
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
"""

import json

import pytest
from fastapi.testclient import TestClient

from main import create_app
from json_authprovider.manager.credential_manager import CredentialManager
from tests.sample_users import SAMPLE_USERS

HOST_TOKEN = "host-token-for-tests"


@pytest.fixture
def write_users(tmp_path):
    """
    Factory writing a users file and returning its path.

    Accepts either a list of records (dumped as JSON) or raw text.
    """
    counter = {"n": 0}

    def _write(content, name=None) -> str:
        counter["n"] += 1
        path = tmp_path / (name or f"users-{counter['n']}.json")
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def users_file(write_users) -> str:
    return write_users(SAMPLE_USERS)


@pytest.fixture
def manager(users_file) -> CredentialManager:
    """CredentialManager loaded with the sample users."""
    mgr = CredentialManager()
    mgr.configure({"users": users_file})
    return mgr


@pytest.fixture
def client(manager) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance wired to the manager fixture.
    """
    return TestClient(create_app(manager=manager, enforce_handshake=False, host_token=HOST_TOKEN))


@pytest.fixture
def host_headers() -> dict:
    """Authorization header accepted by host-only routes."""
    return {"Authorization": f"Bearer {HOST_TOKEN}"}
