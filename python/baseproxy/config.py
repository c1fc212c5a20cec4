from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_VAR = "BASEPROXY_LOG_LEVEL"
LOG_JSON_VAR = "BASEPROXY_LOG_JSON"

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_json: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from ``env`` (``os.environ`` when omitted).

        Unknown log levels fall back to the default rather than failing.
        """
        if env is None:
            env = os.environ
        level = env.get(LOG_LEVEL_VAR, cls.log_level).strip().upper()
        if level not in _LEVELS:
            level = cls.log_level
        return cls(log_level=level, log_json=env.get(LOG_JSON_VAR, "0") == "1")
