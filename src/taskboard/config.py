"""Environment-driven configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from taskboard.constants import APP_NAME, DEFAULT_COLUMNS, STATE_FILENAME


def _config_home(environ: Mapping[str, str]) -> Path:
    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path(environ.get("HOME") or Path.home()) / ".config"


def _parse_columns(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_COLUMNS
    names = tuple(name.strip() for name in raw.split(",") if name.strip())
    return names or DEFAULT_COLUMNS


@dataclass
class Config:
    """Where the board lives and how to log."""

    state_path: Path
    columns: tuple[str, ...] = DEFAULT_COLUMNS
    log_file: Path | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Resolve configuration from TASKBOARD_* variables."""
        if environ is None:
            environ = os.environ
        state = environ.get("TASKBOARD_FILE")
        state_path = Path(state).expanduser() if state else _config_home(environ) / APP_NAME / STATE_FILENAME
        log_file = environ.get("TASKBOARD_LOG")
        return cls(
            state_path=state_path,
            columns=_parse_columns(environ.get("TASKBOARD_COLUMNS")),
            log_file=Path(log_file).expanduser() if log_file else None,
            log_level=(environ.get("TASKBOARD_LOG_LEVEL") or "WARNING").upper(),
        )
