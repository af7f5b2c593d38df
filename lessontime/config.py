"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    output_dir: str = "outputs"


def _level_name(value: str) -> str:
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigError(f"Unknown log level: {value!r}")
    return name


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from LESSONTIME_* environment variables.

    Args:
        dotenv: Load a .env file from the working directory first.

    Raises:
        ConfigError: If LESSONTIME_LOG_LEVEL is not a logging level name.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_level=_level_name(os.getenv("LESSONTIME_LOG_LEVEL", Settings.log_level)),
        output_dir=os.getenv("LESSONTIME_OUTPUT_DIR", Settings.output_dir),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=_level_name(level), format=LOG_FORMAT)
