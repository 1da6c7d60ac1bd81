"""omxplayer remote control over its MPRIS session bus."""

from omx_remote.backend.player.actions import RemoteAction
from omx_remote.backend.player.controller import OmxController
from omx_remote.backend.player.exceptions import (
    DiscoveryError,
    PlayerConnectionError,
    PlayerError,
    RejectedOperationError,
    TransportError,
)
from omx_remote.backend.player.session import SessionParams, connect, discover_session
from omx_remote.backend.player.status import PlaybackStatus
from omx_remote.backend.player.streams import StreamDescriptor, parse_stream_descriptor

__all__ = [
    "DiscoveryError",
    "OmxController",
    "PlaybackStatus",
    "PlayerConnectionError",
    "PlayerError",
    "RejectedOperationError",
    "RemoteAction",
    "SessionParams",
    "StreamDescriptor",
    "TransportError",
    "connect",
    "discover_session",
    "parse_stream_descriptor",
]
