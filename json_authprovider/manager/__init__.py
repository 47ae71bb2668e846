"""
Auth managers: the components a host configures and authenticates against.
"""

from .base import BaseAuthManager
from .credential_manager import CredentialManager

__all__ = ["BaseAuthManager", "CredentialManager"]
