from __future__ import annotations

"""Conversions between protocol microseconds and ``timedelta``.

``timedelta`` stores whole microseconds, so both directions are exact for the
full signed 64-bit range the protocol uses.
"""

from datetime import timedelta

MICROSECOND = timedelta(microseconds=1)


def from_microseconds(value: int) -> timedelta:
    return timedelta(microseconds=int(value))


def to_microseconds(value: timedelta) -> int:
    return value // MICROSECOND
