"""Config directory and config file persistence for clockify-transfer."""

import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR_NAME = "clockify-transfer"
CONFIG_FILE_NAME = "config.yml"


def default_config_dir() -> Path:
    """Return the XDG config directory for clockify-transfer."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME


def default_config_path() -> Path:
    """Return the default config file path."""
    return default_config_dir() / CONFIG_FILE_NAME


class StorageManager:
    """Reads and writes the YAML config file."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize storage manager.

        Args:
            config_path: Config file path. Defaults to the XDG location.
        """
        self.config_file = config_path or default_config_path()
        self.config_dir = self.config_file.parent

    def exists(self) -> bool:
        """Check whether the config file exists."""
        return self.config_file.exists()

    def load_config(self) -> dict[str, Any]:
        """Load the raw config mapping.

        Returns:
            Parsed YAML document, or an empty dict for an empty file.

        Raises:
            OSError: If the file cannot be read.
            yaml.YAMLError: If the file is not valid YAML.
        """
        with open(self.config_file) as f:
            return yaml.safe_load(f) or {}

    def write_text(self, text: str) -> None:
        """Write raw text (a rendered template) to the config file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(text)
