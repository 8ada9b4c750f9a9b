"""Runtime settings, read from the environment.

Environment:
    TRANSPACE_LOG_LEVEL   Log level (default: WARNING)
    TRANSPACE_LOG_FILE    Also write JSON logs to this file (default: unset)
    TRANSPACE_LOG_JSON    JSON log lines on the console (default: false)
    TRANSPACE_SENTINEL    Token printed before encoded output (default: %1$s,
                          empty to disable)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .core.token import parse_one

DEFAULT_SENTINEL = "%1$s"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Options for the command line and logging setup."""
    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    sentinel: str = DEFAULT_SENTINEL   # Leading placeholder for the template's first argument

    def __post_init__(self) -> None:
        # The sentinel must itself be a single placeholder token
        if self.sentinel:
            parse_one(self.sentinel)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables."""
    env = os.environ if environ is None else environ
    return Settings(
        log_level=env.get("TRANSPACE_LOG_LEVEL", "WARNING").upper(),
        log_file=env.get("TRANSPACE_LOG_FILE") or None,
        log_json=_parse_bool("TRANSPACE_LOG_JSON", env.get("TRANSPACE_LOG_JSON", "")),
        sentinel=env.get("TRANSPACE_SENTINEL", DEFAULT_SENTINEL),
    )
