"""Runtime settings read from the environment and an optional ``.env`` file."""

import logging
import os
import sys
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "MISSING_REFS_"
LOG_FORMAT = "%(levelname)s: %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    project_path: str = ""
    log_level: str = "INFO"
    clear_console: bool = True
    platform: str = sys.platform
    show_progress: bool = True


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        project_path=os.getenv(f"{ENV_PREFIX}PROJECT", ""),
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
        clear_console=_env_flag(f"{ENV_PREFIX}CLEAR_CONSOLE", True),
        platform=os.getenv(f"{ENV_PREFIX}PLATFORM") or sys.platform,
        show_progress=_env_flag(f"{ENV_PREFIX}PROGRESS", True),
    )


def configure_logging(level: str) -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")
