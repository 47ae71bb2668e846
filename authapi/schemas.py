"""
Pydantic schemas for request/response models of the host API.
"""

from typing import Dict

from pydantic import BaseModel

from json_authprovider.models import Scope, User


class AuthenticateRequest(BaseModel):
    """Schema for an authentication request payload."""
    username: str
    secret: str


class AuthenticateResponse(BaseModel):
    """Schema for a successful authentication."""
    user: User
    scopes: Dict[str, Scope]


class ConfigureResponse(BaseModel):
    """Schema for the result of a (re)configuration."""
    status: str
    users: int
