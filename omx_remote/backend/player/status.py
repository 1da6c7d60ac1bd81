from __future__ import annotations

from enum import Enum


class PlaybackStatus(str, Enum):
    """Playback state as reported by the ``PlaybackStatus`` property."""

    UNKNOWN = "Unknown"
    PLAYING = "Playing"
    PAUSED = "Paused"

    @classmethod
    def from_raw(cls, raw: object) -> "PlaybackStatus":
        # "Stopped" and anything unrecognised collapse into UNKNOWN
        if raw == cls.PLAYING.value:
            return cls.PLAYING
        if raw == cls.PAUSED.value:
            return cls.PAUSED
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value
