"""
Runtime settings: HTTP endpoint, timeout, log level.

The defaults are enough to run; a JSON file may override them.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from exercises_app.utils import load_and_validate

DEFAULT_TODO_URL = "https://jsonplaceholder.typicode.com/todos/1"
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class AppSettings(BaseModel):
    """Validated runtime settings."""

    todo_url: str = DEFAULT_TODO_URL
    http_timeout: float = Field(default=10.0, gt=0, description="Seconds")
    log_level: str = "INFO"
    wait_for_key: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(path: Optional[Path | str] = None) -> AppSettings:
    """Return the defaults, or the settings stored in the JSON file at `path`."""
    if path is None:
        return AppSettings()
    return load_and_validate(Path(path), AppSettings)


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stdout, interleaved with the exercise output."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
