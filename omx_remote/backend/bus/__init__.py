"""Session bus transport seam; the dbus-python backend is imported on demand."""

from omx_remote.backend.bus.base import (
    PLAYER_INTERFACE,
    PROPERTIES_INTERFACE,
    BusTransport,
    method_full_name,
)

__all__ = [
    "BusTransport",
    "PLAYER_INTERFACE",
    "PROPERTIES_INTERFACE",
    "method_full_name",
]
