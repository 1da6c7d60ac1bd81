from __future__ import annotations

import json
import logging
import sys
import time
from typing import IO, Any, MutableMapping, Optional

from omx_remote.backend.common.types import LOG_LEVELS



# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: MutableMapping[str, Any] = {
            "ts": int(time.time() * 1000),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = value

        return json.dumps(payload, ensure_ascii=False, default=str)


def init_logging(level: Optional[str] = None, stream: Optional[IO[str]] = None) -> None:
    """Install the JSON handler on the root logger.

    Library code never calls this; it is meant for the program embedding the client.
    Without ``level`` the configured ``OMX_REMOTE_LOG_LEVEL`` setting is used.
    """
    if level is None:
        from omx_remote.config.settings import get_settings

        level = get_settings().log_level

    root = logging.getLogger()

    # Idempotent: clear existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)

    name = level.upper()
    root.setLevel(getattr(logging, name) if name in LOG_LEVELS else logging.INFO)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else "omx_remote")
