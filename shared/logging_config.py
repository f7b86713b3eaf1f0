"""
Logging configuration for topology translation.

The library modules only create loggers; handlers are installed here, by
whoever embeds the translation step (admission hooks, migration tools, tests).
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_DATEFMT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    component_name: str,
    level=logging.INFO,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
):
    """
    Configure logging for the translation library and its caller.

    Args:
        component_name: Component identifier shown in every line (e.g. 'topology')
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        format_string: Custom format string (default provided)

    Returns:
        The component logger
    """
    if format_string is None:
        format_string = f'[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(name)s - %(message)s'

    # No-op when the root logger already has handlers
    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=DEFAULT_DATEFMT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Package loggers follow the configured level
    logging.getLogger("topology_translation").setLevel(level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(format_string, datefmt=DEFAULT_DATEFMT))
        logging.getLogger().addHandler(file_handler)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)
    logger.info(f"{component_name.upper()} logging initialized (level={logging.getLevelName(level)})")

    return logger
