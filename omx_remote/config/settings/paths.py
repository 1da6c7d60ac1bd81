from __future__ import annotations

from pathlib import Path
from typing import Union

from dotenv import load_dotenv

_CONFIG_DIR = Path(__file__).resolve().parent.parent
_PACKAGE_ROOT = _CONFIG_DIR.parent

load_dotenv(_PACKAGE_ROOT / ".env")

DEFAULT_RUNTIME_DIR = "/tmp"
DISCOVERY_FILE_PREFIX = "omxplayerdbus"


def get_bus_address_path(user: str, runtime_dir: Union[str, Path] = DEFAULT_RUNTIME_DIR) -> Path:
    """File the player writes its session bus address into."""
    return Path(runtime_dir) / f"{DISCOVERY_FILE_PREFIX}.{user}"


def get_bus_pid_path(user: str, runtime_dir: Union[str, Path] = DEFAULT_RUNTIME_DIR) -> Path:
    """Companion file holding the pid of the player's session bus daemon."""
    return Path(runtime_dir) / f"{DISCOVERY_FILE_PREFIX}.{user}.pid"


__all__ = [
    "DEFAULT_RUNTIME_DIR",
    "DISCOVERY_FILE_PREFIX",
    "get_bus_address_path",
    "get_bus_pid_path",
]
