"""Logging configuration for qutescript userscripts."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

MAX_LOG_FILE_BYTES = 5 * 1024 * 1024  # 5 MiB per rotated file.
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_file_path(log_file: Union[str, Path]) -> Path:
    """Expand ``~`` in a configured log-file path."""
    return Path(log_file).expanduser()


def setup_logging(
    level_name: str = "WARNING", log_file: Optional[Union[str, Path]] = None
) -> None:
    """Configure root logging to a rotating file; no-op without a log file."""
    level = getattr(logging, level_name.upper(), logging.WARNING)

    if not log_file:
        return
    log_path = resolve_log_file_path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = RotatingFileHandler(
        log_path,
        mode="a",  # Several userscript runs share one file.
        maxBytes=MAX_LOG_FILE_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Remove existing handlers to avoid duplicates if re-initialized
    for existing_handler in list(logger.handlers):
        logger.removeHandler(existing_handler)
        existing_handler.close()

    logger.addHandler(handler)
