"""Structured logging configuration for Weather Scene.

JSON records go to <log_dir>/weather_scene.log (10MB rotation, 5 backups) and
human-readable lines go to stdout. Streamlit re-executes the page script on
every interaction, so ``setup_logging`` may be called many times per process:
it only ever replaces (and closes) the handlers it installed itself.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_FILE_NAME = "weather_scene.log"
JSON_HANDLER_NAME = "weather_scene.json"
CONSOLE_HANDLER_NAME = "weather_scene.console"


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() in (JSON_HANDLER_NAME, CONSOLE_HANDLER_NAME)]


def teardown_logging() -> None:
    """Detach and close the handlers installed by ``setup_logging``."""
    root_logger = logging.getLogger()
    for handler in _owned_handlers(root_logger):
        root_logger.removeHandler(handler)
        handler.close()


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure JSON file logging and console logging on the root logger.

    Safe to call repeatedly: handlers from a previous call are closed before
    new ones are attached, so no file descriptors are left behind. Handlers
    installed by anyone else (pytest, Streamlit) are left untouched.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the JSON log file (defaults to ./logs next to the package)

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper())
    if log_dir is None:
        log_dir = Path(__file__).parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    teardown_logging()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    json_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    json_handler.set_name(JSON_HANDLER_NAME)
    json_handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    json_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    # Per-request lines come from our own event hooks
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (typically ``get_logger(__name__)``)."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Fields added to the JSON record (e.g. city, request_id, event_type)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
