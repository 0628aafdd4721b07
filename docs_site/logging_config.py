"""Structured logging for the docs site.

Two sinks share the root logger:

- logs/docs_site.log: one JSON object per record (10MB rotation, 5 backups),
  including every field passed through log_with_context
- stdout: a short human-readable line per record

Records carry an ``event_type`` field so page traffic (``http_request``,
``page_request``, ``page_rendered``) can be told apart from assembly failures
(``template_missing``, ``template_invalid``, ``template_path_missing``,
``content_missing``) when filtering the JSON log.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "docs_site.log"


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Install the JSON file and console handlers on the root logger.

    Called once from docs_site.main before the app is created; calling it
    again replaces the handlers instead of stacking them.

    Args:
        log_level: Console and root level (DEBUG shows per-page render records)
        log_dir: Directory for docs_site.log (defaults to ./logs next to the package)

    Returns:
        Configured root logger instance
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.handlers.clear()

    json_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    json_handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    json_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    console_handler.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(console_handler)

    # Our middleware already logs each request with timing
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__ so records are grouped by docs_site module."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with structured fields attached to the record.

    The fields become attributes of the LogRecord and keys of the JSON line,
    e.g. ``slug``, ``template``, ``status_code`` and ``event_type``.

    Args:
        logger: Logger instance
        level: Log level name (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Structured context for the record
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
