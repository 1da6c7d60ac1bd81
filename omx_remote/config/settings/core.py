from __future__ import annotations

import getpass
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from omx_remote.backend.common.logging import get_logger
from omx_remote.backend.common.types import LOG_LEVELS

from .paths import DEFAULT_RUNTIME_DIR, get_bus_address_path, get_bus_pid_path

log = get_logger(__name__)

_SETTINGS_LOCK = threading.Lock()
_SETTINGS_SINGLETON: Optional["Settings"] = None

DEFAULT_SERVICE_NAME = "org.mpris.MediaPlayer2.omxplayer"
DEFAULT_OBJECT_PATH = "/org/mpris/MediaPlayer2"


@dataclass
class Settings:
    user: str
    runtime_dir: str
    service_name: str
    object_path: str
    log_level: str
    call_timeout: Optional[float] = None

    @property
    def bus_address_path(self) -> Path:
        return get_bus_address_path(self.user, self.runtime_dir)

    @property
    def bus_pid_path(self) -> Path:
        return get_bus_pid_path(self.user, self.runtime_dir)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "user": self.user,
            "runtime_dir": self.runtime_dir,
            "service_name": self.service_name,
            "object_path": self.object_path,
            "log_level": self.log_level,
            "call_timeout": self.call_timeout,
            "bus_address_path": str(self.bus_address_path),
            "bus_pid_path": str(self.bus_pid_path),
        }


def _default_user(env: Mapping[str, str]) -> str:
    user = env.get("OMX_REMOTE_USER") or env.get("USER")
    if user:
        return user
    return getpass.getuser()


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        log.warning("settings_call_timeout_invalid", extra={"raw": raw})
        return None
    if value <= 0:
        log.warning("settings_call_timeout_invalid", extra={"raw": raw})
        return None

    return value


def build_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env

    log_level = env.get("OMX_REMOTE_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        user=_default_user(env),
        runtime_dir=env.get("OMX_REMOTE_RUNTIME_DIR") or DEFAULT_RUNTIME_DIR,
        service_name=env.get("OMX_REMOTE_SERVICE") or DEFAULT_SERVICE_NAME,
        object_path=env.get("OMX_REMOTE_OBJECT_PATH") or DEFAULT_OBJECT_PATH,
        log_level=log_level,
        call_timeout=_parse_timeout(env.get("OMX_REMOTE_CALL_TIMEOUT")),
    )


def get_settings(*, reload: bool = False) -> Settings:
    global _SETTINGS_SINGLETON
    with _SETTINGS_LOCK:
        if _SETTINGS_SINGLETON is None or reload:
            _SETTINGS_SINGLETON = build_settings()

        return _SETTINGS_SINGLETON


__all__ = [
    "DEFAULT_OBJECT_PATH",
    "DEFAULT_SERVICE_NAME",
    "Settings",
    "build_settings",
    "get_settings",
]
