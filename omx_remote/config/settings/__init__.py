from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

__all__ = [
    "DEFAULT_OBJECT_PATH",
    "DEFAULT_RUNTIME_DIR",
    "DEFAULT_SERVICE_NAME",
    "DISCOVERY_FILE_PREFIX",
    "Settings",
    "build_settings",
    "core",
    "get_bus_address_path",
    "get_bus_pid_path",
    "get_settings",
    "paths",
]

_MODULE_EXPORTS = {
    "core": {
        "DEFAULT_OBJECT_PATH",
        "DEFAULT_SERVICE_NAME",
        "Settings",
        "build_settings",
        "get_settings",
    },
    "paths": {
        "DEFAULT_RUNTIME_DIR",
        "DISCOVERY_FILE_PREFIX",
        "get_bus_address_path",
        "get_bus_pid_path",
    },
}

_SUBMODULE_NAMES = {"core", "paths"}

if TYPE_CHECKING:  # pragma: no cover - only for static analysis
    from . import core, paths
    from .core import DEFAULT_OBJECT_PATH, DEFAULT_SERVICE_NAME, Settings, build_settings, get_settings
    from .paths import DEFAULT_RUNTIME_DIR, DISCOVERY_FILE_PREFIX, get_bus_address_path, get_bus_pid_path


def __getattr__(name: str) -> Any:
    if name in _SUBMODULE_NAMES:
        module = importlib.import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    for module_name, symbols in _MODULE_EXPORTS.items():
        if name in symbols:
            module = importlib.import_module(f"{__name__}.{module_name}")
            value = getattr(module, name)
            globals()[name] = value
            return value

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:
    exported = set(__all__)
    exported.update(_SUBMODULE_NAMES)
    for symbols in _MODULE_EXPORTS.values():
        exported.update(symbols)
    exported.update(globals().keys())
    return sorted(exported)
