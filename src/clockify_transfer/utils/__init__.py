"""Utility modules for clockify-transfer."""

from clockify_transfer.utils.logging import get_logger, setup_logging
from clockify_transfer.utils.storage import StorageManager, default_config_path

__all__ = ["get_logger", "setup_logging", "StorageManager", "default_config_path"]
