import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config.settings import Settings

LOG_FILE_MAX_BYTES_DEFAULT = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT_DEFAULT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(module)s.%(funcName)s:%(lineno)d] - %(message)s"


def log_file_for(logger_name: str, log_dir: Path) -> Path:
    """Log file of a logger; characters outside [A-Za-z0-9_-] become underscores."""
    sanitized = "".join(c if c.isalnum() or c in ['_', '-'] else '_' for c in logger_name)
    return log_dir / f"{sanitized}.log"


def setup_logging(
    logger_name: str = Settings.LOGGER_NAME,
    log_level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    log_file_max_bytes: int = LOG_FILE_MAX_BYTES_DEFAULT,
    log_file_backup_count: int = LOG_FILE_BACKUP_COUNT_DEFAULT,
    console_output: bool = True,
) -> logging.Logger:
    """
    Configure the named logger with a console handler and a rotating file handler.

    Calling it again for an already configured logger (every Streamlit rerun
    does) only updates the level.

    Args:
        logger_name: Name of the logger to configure.
        log_level: Minimum level to capture.
        log_dir: Directory of the log files; defaults to ``Settings.LOGS_DIR``.
        log_file_max_bytes: Size at which the log file rotates.
        log_file_backup_count: Number of rotated files to keep.
        console_output: Whether to also log to stdout.

    Returns:
        The configured logger.
    """
    log_dir = log_dir or Settings.LOGS_DIR
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    if logger.handlers:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    file_handler = RotatingFileHandler(
        log_file_for(logger_name, log_dir),
        maxBytes=log_file_max_bytes,
        backupCount=log_file_backup_count,
        encoding='utf-8',
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger
