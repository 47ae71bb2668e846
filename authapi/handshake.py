"""
Plugin handshake.

A host launching the provider as a plugin sets a magic cookie in the
environment. The provider refuses to serve when the cookie is missing or
wrong, which keeps it from being started by accident outside a host.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


class HandshakeError(RuntimeError):
    """The host handshake cookie is missing or does not match."""


@dataclass(frozen=True)
class HandshakeConfig:
    protocol_version: int = 1
    magic_cookie_key: str = "BASIC_PLUGIN"
    magic_cookie_value: str = "hello"


HANDSHAKE = HandshakeConfig()


def verify_handshake(
    environ: Optional[Mapping[str, str]] = None,
    handshake: HandshakeConfig = HANDSHAKE,
) -> None:
    """
    Check the host's magic cookie.

    Args:
        environ: Environment to inspect (defaults to os.environ).
        handshake: Expected handshake values.

    Raises:
        HandshakeError: If the cookie is absent or has the wrong value.
    """
    env = os.environ if environ is None else environ
    value = env.get(handshake.magic_cookie_key)
    if value != handshake.magic_cookie_value:
        raise HandshakeError(
            "This binary is a plugin. These are not meant to be executed directly. "
            "Please execute the program that consumes these plugins, which will "
            "load any plugins automatically"
        )
