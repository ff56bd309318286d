"""Logging configuration for clockify-transfer."""

import logging
from pathlib import Path

from clockify_transfer.utils.storage import default_config_dir

LOG_FILE_NAME = "clockify-transfer.log"


def setup_logging(
    log_level: int = logging.INFO,
    config_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> None:
    """Configure logging for the application.

    The console handler writes to stderr and stays at WARNING unless
    asked otherwise, so it does not interleave with the progress lines.

    Args:
        log_level: Logging level for the log file (e.g., logging.INFO).
        config_dir: Directory to store the log file. Defaults to the config directory.
        console_level: Logging level for the stderr handler.
    """
    if config_dir is None:
        config_dir = default_config_dir()

    config_dir.mkdir(parents=True, exist_ok=True)
    log_file = config_dir / LOG_FILE_NAME

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(min(log_level, console_level))

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # File handler
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(log_level)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_formatter = logging.Formatter(
        "%(name)s - %(levelname)s - %(message)s",
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
