from __future__ import annotations

"""Locate omxplayer's private session bus and bind a controller to it."""

from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from omx_remote.backend.bus.base import BusTransport
from omx_remote.backend.common.logging import get_logger
from omx_remote.backend.player.controller import OmxController
from omx_remote.backend.player.exceptions import DiscoveryError, PlayerConnectionError
from omx_remote.config.settings import Settings, get_bus_address_path, get_bus_pid_path, get_settings

log = get_logger(__name__)


class SessionParams(BaseModel):
    """Connection parameters read from the discovery files."""

    model_config = ConfigDict(frozen=True)

    user: str
    address: str
    pid: int

    @field_validator("address")
    @classmethod
    def _address_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("bus address is empty")
        return value

    @field_validator("pid", mode="before")
    @classmethod
    def _strip_pid(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


TransportFactory = Callable[[SessionParams, Settings], BusTransport]


def _read_discovery_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DiscoveryError(f"Unable to read {path}: {exc}") from exc


def discover_session(settings: Optional[Settings] = None) -> SessionParams:
    settings = settings or get_settings()
    address_path = get_bus_address_path(settings.user, settings.runtime_dir)
    pid_path = get_bus_pid_path(settings.user, settings.runtime_dir)
    address = _read_discovery_file(address_path)
    pid = _read_discovery_file(pid_path)
    try:
        params = SessionParams(user=settings.user, address=address, pid=pid)
    except ValidationError as exc:
        raise DiscoveryError(f"Invalid discovery files {address_path}, {pid_path}: {exc}") from exc
    log.debug("bus_session_discovered", extra={"user": params.user, "bus_pid": params.pid})
    return params


def open_transport(params: SessionParams, settings: Settings) -> BusTransport:
    try:
        from omx_remote.backend.bus.dbus_transport import DBusTransport
    except ImportError as exc:
        raise PlayerConnectionError(f"dbus-python import failed: {exc}") from exc
    return DBusTransport.open(
        params.address,
        settings.service_name,
        settings.object_path,
        timeout=settings.call_timeout,
    )


def connect(
    settings: Optional[Settings] = None,
    *,
    transport_factory: TransportFactory = open_transport,
) -> OmxController:
    """Discover the running player's bus and return a ready controller."""
    settings = settings or get_settings()
    params = discover_session(settings)
    transport = transport_factory(params, settings)
    return OmxController(transport)
