from __future__ import annotations

"""Transport capability the player controller is written against."""

from typing import Any, Optional, Protocol, Sequence

PLAYER_INTERFACE = "org.mpris.MediaPlayer2.Player"
PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"


def method_full_name(short_name: str, interface: str = PLAYER_INTERFACE) -> str:
    return f"{interface}.{short_name}"


class BusTransport(Protocol):
    """One session bus connection bound to the player's remote object.

    ``invoke`` takes an interface-qualified member name such as
    ``org.mpris.MediaPlayer2.Player.Seek``. ``signature`` is the D-Bus type
    signature of ``args``; ``None`` lets the transport guess from Python types.
    Every method raises ``TransportError`` when the call fails.
    """

    def invoke(self, method: str, args: Sequence[Any] = (), signature: Optional[str] = None) -> Any:
        ...

    def get_property(self, interface: str, name: str) -> Any:
        ...

    def set_property(self, interface: str, name: str, value: Any) -> Any:
        ...

    def close(self) -> None:
        ...
