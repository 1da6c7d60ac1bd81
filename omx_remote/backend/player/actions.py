from __future__ import annotations

"""Keyboard-style action codes accepted by the player's ``Action`` method."""

from enum import IntEnum, unique


@unique
class RemoteAction(IntEnum):
    """Discrete commands sent verbatim through the ``Action`` method."""

    # Codes mirror the player's key bindings; never renumber.
    DECREASE_SPEED = 1
    INCREASE_SPEED = 2
    REWIND = 3
    FAST_FORWARD = 4
    SHOW_INFO = 5
    PREVIOUS_AUDIO = 6
    NEXT_AUDIO = 7
    PREVIOUS_CHAPTER = 8
    NEXT_CHAPTER = 9
    PREVIOUS_SUBTITLE = 10
    NEXT_SUBTITLE = 11
    TOGGLE_SUBTITLE = 12
    DECREASE_SUBTITLE_DELAY = 13
    INCREASE_SUBTITLE_DELAY = 14
    EXIT = 15
    PLAY_PAUSE = 16
    DECREASE_VOLUME = 17
    INCREASE_VOLUME = 18
    SEEK_BACK_SMALL = 19
    SEEK_FORWARD_SMALL = 20
    SEEK_BACK_LARGE = 21
    SEEK_FORWARD_LARGE = 22
    STEP = 23
    BLANK = 24
    SEEK_RELATIVE = 25
    SEEK_ABSOLUTE = 26
    MOVE_VIDEO = 27
    HIDE_VIDEO = 28
    UNHIDE_VIDEO = 29
    HIDE_SUBTITLES = 30
    SHOW_SUBTITLES = 31
    SET_ALPHA = 32
    SET_ASPECT_MODE = 33
    CROP_VIDEO = 34
    PAUSE = 35
    PLAY = 36
