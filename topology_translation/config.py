import logging
import os

from shared.logging_config import setup_logging


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = str(raw).strip()
    return raw or default


def _level_env(name: str, default: int) -> int:
    raw = _str_env(name, logging.getLevelName(default)).upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    return default


LOG_LEVEL = _level_env("TOPOLOGY_TRANSLATION_LOG_LEVEL", logging.INFO)
LOG_FILE = _str_env("TOPOLOGY_TRANSLATION_LOG_FILE", "") or None


def configure_logging(component_name: str = "topology"):
    """Apply the environment logging settings through setup_logging."""
    return setup_logging(component_name, level=LOG_LEVEL, log_file=LOG_FILE)
