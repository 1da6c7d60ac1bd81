from __future__ import annotations

from pathlib import Path

import pytest

from omx_remote.config.settings import (
    DEFAULT_OBJECT_PATH,
    DEFAULT_SERVICE_NAME,
    build_settings,
    get_bus_address_path,
    get_bus_pid_path,
    get_settings,
)


def test_defaults_follow_login_user() -> None:
    settings = build_settings({"USER": "pi"})
    assert settings.user == "pi"
    assert settings.runtime_dir == "/tmp"
    assert settings.service_name == DEFAULT_SERVICE_NAME == "org.mpris.MediaPlayer2.omxplayer"
    assert settings.object_path == DEFAULT_OBJECT_PATH == "/org/mpris/MediaPlayer2"
    assert settings.log_level == "INFO"
    assert settings.call_timeout is None
    assert settings.bus_address_path == Path("/tmp/omxplayerdbus.pi")
    assert settings.bus_pid_path == Path("/tmp/omxplayerdbus.pi.pid")


def test_env_overrides() -> None:
    settings = build_settings(
        {
            "USER": "root",
            "OMX_REMOTE_USER": "kiosk",
            "OMX_REMOTE_RUNTIME_DIR": "/run/omx",
            "OMX_REMOTE_SERVICE": "org.mpris.MediaPlayer2.omxplayer.instance2",
            "OMX_REMOTE_OBJECT_PATH": "/custom",
            "OMX_REMOTE_CALL_TIMEOUT": "1.5",
            "OMX_REMOTE_LOG_LEVEL": "debug",
        }
    )
    assert settings.user == "kiosk"
    assert settings.service_name.endswith("instance2")
    assert settings.object_path == "/custom"
    assert settings.call_timeout == 1.5
    assert settings.log_level == "DEBUG"
    assert settings.as_dict()["bus_pid_path"] == "/run/omx/omxplayerdbus.kiosk.pid"


@pytest.mark.parametrize("raw", ["soon", "0", "-2", " "])
def test_invalid_timeout_falls_back(raw: str) -> None:
    assert build_settings({"USER": "pi", "OMX_REMOTE_CALL_TIMEOUT": raw}).call_timeout is None


def test_invalid_log_level_falls_back() -> None:
    assert build_settings({"USER": "pi", "OMX_REMOTE_LOG_LEVEL": "chatty"}).log_level == "INFO"


def test_discovery_paths() -> None:
    assert get_bus_address_path("alice", "/var/run") == Path("/var/run/omxplayerdbus.alice")
    assert get_bus_pid_path("alice") == Path("/tmp/omxplayerdbus.alice.pid")


def test_get_settings_caches_until_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OMX_REMOTE_USER", "first")
    first = get_settings(reload=True)
    monkeypatch.setenv("OMX_REMOTE_USER", "second")
    assert get_settings() is first
    assert get_settings(reload=True).user == "second"
