"""Runtime configuration from environment variables and an optional .env file.

PHONEBOOK_FILE            backing file path (default "phonebook.txt")
PHONEBOOK_FORMAT          "pipe" (default) or "escaped"
PHONEBOOK_DEFAULT_REGION  region code for displaying numbers typed without "+", e.g. "US"
PHONEBOOK_LOG_LEVEL       logging level name (default "WARNING")
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_FILE = "phonebook.txt"
DEFAULT_FORMAT = "pipe"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class PhonebookConfig:
    file: Path = Path(DEFAULT_FILE)
    format: str = DEFAULT_FORMAT
    default_region: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {self.log_level!r}.")
        return level


def get_config(env_file: str | os.PathLike | None = None) -> PhonebookConfig:
    """Load .env (current dir, or env_file) without overriding real env vars, then read PHONEBOOK_*."""
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path, override=False)

    region = os.environ.get("PHONEBOOK_DEFAULT_REGION", "").strip().upper() or None
    return PhonebookConfig(
        file=Path(os.environ.get("PHONEBOOK_FILE", "").strip() or DEFAULT_FILE),
        format=os.environ.get("PHONEBOOK_FORMAT", "").strip().lower() or DEFAULT_FORMAT,
        default_region=region,
        log_level=os.environ.get("PHONEBOOK_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL,
    )
