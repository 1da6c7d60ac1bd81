from __future__ import annotations

"""High-level remote control of a running omxplayer over its MPRIS interface."""

from datetime import timedelta
from typing import Any, Optional, Sequence, Union

from omx_remote.backend.bus.base import PLAYER_INTERFACE, BusTransport, method_full_name
from omx_remote.backend.common.logging import get_logger
from omx_remote.backend.player.actions import RemoteAction
from omx_remote.backend.player.exceptions import RejectedOperationError
from omx_remote.backend.player.status import PlaybackStatus
from omx_remote.backend.player.streams import StreamDescriptor, parse_stream_descriptors
from omx_remote.backend.player.units import from_microseconds, to_microseconds

log = get_logger(__name__)

# SetPosition wants a track id; omxplayer ignores it, so any object path does.
_TRACK_PLACEHOLDER = "/"


class OmxController:
    """Translates player operations into calls on a bound bus transport.

    Every public method issues exactly one blocking call. Transport failures
    surface as ``TransportError``; replies the player uses to signal a refused
    seek surface as ``RejectedOperationError``. An instance owns its transport
    and is not meant to be shared between threads.
    """

    def __init__(self, transport: BusTransport) -> None:
        self._transport = transport
        self._closed = False

    def __enter__(self) -> "OmxController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    # ------------------------------------------------------------------
    # Playback lifecycle
    # ------------------------------------------------------------------
    def action(self, action: Union[RemoteAction, int]) -> None:
        self._call("Action", (int(action),), signature="i")

    def play(self) -> None:
        self._call("Play")

    def pause(self) -> None:
        self._call("Pause")

    def play_pause(self) -> None:
        self._call("PlayPause")

    def stop(self) -> None:
        self._call("Stop")

    def next(self) -> None:
        self._call("Next")

    def previous(self) -> None:
        self._call("Previous")

    def mute(self) -> None:
        self._call("Mute")

    def unmute(self) -> None:
        self._call("Unmute")

    def show_subtitles(self) -> None:
        self._call("ShowSubtitles")

    def hide_subtitles(self) -> None:
        self._call("HideSubtitles")

    def seek(self, offset: timedelta) -> None:
        """Move playback relative to the current position."""
        reply = self._call("Seek", (to_microseconds(offset),), signature="x")
        if not reply:
            raise RejectedOperationError(f"invalid seek offset: {offset}")

    def set_position(self, position: timedelta) -> None:
        """Jump to an absolute position.

        The player answers 0 both for a refused jump and for a jump to the very
        start, so a zero reply is only an error when a non-zero position was asked.
        """
        micros = to_microseconds(position)
        reply = self._call("SetPosition", (_TRACK_PLACEHOLDER, micros), signature="ox")
        if micros != 0 and not reply:
            raise RejectedOperationError(f"invalid position: {position}")

    # ------------------------------------------------------------------
    # Track selection
    # ------------------------------------------------------------------
    def audio_tracks(self) -> list[StreamDescriptor]:
        return self._list_streams("ListAudio")

    def subtitles(self) -> list[StreamDescriptor]:
        return self._list_streams("ListSubtitles")

    def video_streams(self) -> list[StreamDescriptor]:
        return self._list_streams("ListVideo")

    def select_audio(self, index: int) -> bool:
        return bool(self._call("SelectAudio", (index,), signature="i"))

    def select_subtitle(self, index: int) -> bool:
        return bool(self._call("SelectSubtitle", (index,), signature="i"))

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    def can_control(self) -> bool:
        return bool(self._get("CanControl"))

    def can_seek(self) -> bool:
        return bool(self._get("CanSeek"))

    def can_play(self) -> bool:
        return bool(self._get("CanPlay"))

    def can_pause(self) -> bool:
        return bool(self._get("CanPause"))

    def duration(self) -> timedelta:
        return from_microseconds(self._get("Duration"))

    def position(self) -> timedelta:
        return from_microseconds(self._get("Position"))

    def playback_status(self) -> PlaybackStatus:
        return PlaybackStatus.from_raw(self._get("PlaybackStatus"))

    def playing(self) -> str:
        """URI or path of the source currently loaded."""
        return str(self._call("GetSource"))

    def volume(self) -> float:
        return float(self._get("Volume"))

    def set_volume(self, volume: float) -> float:
        """Set the volume and return the value the player actually applied."""
        applied = self._transport.set_property(PLAYER_INTERFACE, "Volume", float(volume))
        log.debug("player_volume_set", extra={"requested": volume, "applied": applied})
        return float(applied)

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._transport.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _call(self, name: str, args: Sequence[Any] = (), signature: Optional[str] = None) -> Any:
        return self._transport.invoke(method_full_name(name), args, signature=signature)

    def _get(self, name: str) -> Any:
        return self._transport.get_property(PLAYER_INTERFACE, name)

    def _list_streams(self, name: str) -> list[StreamDescriptor]:
        return parse_stream_descriptors(self._call(name) or ())
