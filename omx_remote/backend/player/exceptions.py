from __future__ import annotations

"""Exceptions for the player subsystem."""

from typing import Optional

from omx_remote.backend.common.errors import OmxRemoteError


class PlayerError(OmxRemoteError):
    """Top-level error raised by the player subsystem."""


class DiscoveryError(PlayerError):
    """Raised when the bus discovery files are missing, unreadable or malformed."""


class PlayerConnectionError(PlayerError):
    """Raised when the session bus connection cannot be opened or the player bound."""


class TransportError(PlayerError):
    """Raised when a call cannot be delivered or the player replies with a fault."""

    def __init__(self, message: str, *, dbus_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.dbus_name = dbus_name


class RejectedOperationError(PlayerError):
    """Raised when a call round-tripped but the player's reply signals rejection."""
