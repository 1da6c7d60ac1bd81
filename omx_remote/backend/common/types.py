from __future__ import annotations

from typing import Literal



LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

LOG_LEVELS: tuple[LogLevel, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
