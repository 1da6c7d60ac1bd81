from __future__ import annotations

"""dbus-python implementation of :class:`BusTransport`."""

from typing import Any, Optional, Sequence

import dbus
import dbus.bus
import dbus.exceptions

from omx_remote.backend.bus.base import PROPERTIES_INTERFACE
from omx_remote.backend.common.logging import get_logger
from omx_remote.backend.player.exceptions import PlayerConnectionError, TransportError

log = get_logger(__name__)


def dbus_to_python(value: Any) -> Any:
    """Strip dbus-python wrapper types from a reply."""
    # Boolean subclasses int, so it has to be checked first
    if isinstance(value, dbus.Boolean):
        return bool(value)
    if isinstance(value, (dbus.String, dbus.ObjectPath, dbus.Signature)):
        return str(value)
    if isinstance(value, (dbus.Byte, dbus.Int16, dbus.UInt16, dbus.Int32, dbus.UInt32, dbus.Int64, dbus.UInt64)):
        return int(value)
    if isinstance(value, dbus.Double):
        return float(value)
    if isinstance(value, dbus.Array):
        return [dbus_to_python(v) for v in value]
    if isinstance(value, dbus.Struct):
        return tuple(dbus_to_python(v) for v in value)
    if isinstance(value, dbus.Dictionary):
        return {dbus_to_python(k): dbus_to_python(v) for k, v in value.items()}
    return value


class DBusTransport:
    """Owns one private session bus connection and the player proxy object."""

    def __init__(self, connection: Any, proxy: Any, *, timeout: Optional[float] = None) -> None:
        self._connection = connection
        self._proxy = proxy
        self._timeout = timeout

    @classmethod
    def open(
        cls,
        address: str,
        service_name: str,
        object_path: str,
        *,
        timeout: Optional[float] = None,
    ) -> "DBusTransport":
        try:
            connection = dbus.bus.BusConnection(address)
        except dbus.exceptions.DBusException as exc:
            raise PlayerConnectionError(f"Unable to open session bus at {address}: {exc}") from exc
        try:
            proxy = connection.get_object(service_name, object_path, introspect=False)
        except dbus.exceptions.DBusException as exc:
            connection.close()
            raise PlayerConnectionError(f"Unable to bind {service_name} at {object_path}: {exc}") from exc
        log.info("bus_session_opened", extra={"service": service_name, "object_path": object_path})
        return cls(connection, proxy, timeout=timeout)

    def invoke(self, method: str, args: Sequence[Any] = (), signature: Optional[str] = None) -> Any:
        interface, _, member = method.rpartition(".")
        kwargs: dict[str, Any] = {}
        if signature is not None:
            kwargs["signature"] = signature
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        log.debug("bus_call", extra={"method": method, "call_args": list(args)})
        try:
            reply = self._proxy.get_dbus_method(member, dbus_interface=interface)(*args, **kwargs)
        except dbus.exceptions.DBusException as exc:
            raise TransportError(f"{method} failed: {exc}", dbus_name=exc.get_dbus_name()) from exc
        return dbus_to_python(reply)

    def get_property(self, interface: str, name: str) -> Any:
        return self.invoke(f"{PROPERTIES_INTERFACE}.Get", (interface, name), signature="ss")

    def set_property(self, interface: str, name: str, value: Any) -> Any:
        return self.invoke(f"{PROPERTIES_INTERFACE}.Set", (interface, name, value), signature="ssv")

    def close(self) -> None:
        try:
            self._connection.close()
        except dbus.exceptions.DBusException as exc:
            raise TransportError(f"Closing the session bus failed: {exc}", dbus_name=exc.get_dbus_name()) from exc
        log.info("bus_session_closed")
