import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .collector import MARKETCAP_URL
from .errors import ConfigError


def parse_float(name: str, value: Optional[str], default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}")


def parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def parse_level(name: str, value: Optional[str], default: str) -> str:
    if value is None or value.strip() == "":
        return default
    level = value.strip().upper()
    # getLevelName maps known names to their number, anything else back to a string
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{name} must be a logging level, got {value!r}")
    return level


@dataclass(frozen=True)
class Settings:
    MARKETCAP_URL: str
    MARKETCAP_TIMEOUT: float
    MARKETCAP_MARGIN: int
    LOG_LEVEL: str

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv()
        return Settings(
            MARKETCAP_URL=os.getenv("MARKETCAP_URL", MARKETCAP_URL),
            MARKETCAP_TIMEOUT=parse_float("MARKETCAP_TIMEOUT", os.getenv("MARKETCAP_TIMEOUT"), 10.0),
            MARKETCAP_MARGIN=parse_int("MARKETCAP_MARGIN", os.getenv("MARKETCAP_MARGIN"), 5),
            LOG_LEVEL=parse_level("LOG_LEVEL", os.getenv("LOG_LEVEL"), "WARNING"),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
