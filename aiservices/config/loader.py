"""
Configuration loader for YAML files.

Loads optional overrides for the bootstrap prerequisites.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import BootstrapSettings


class ConfigLoader:
    """
    Loads and validates bootstrap settings from a YAML file.

    The file may hold the settings at the top level or nested under a
    ``bootstrap`` key. Without a path the built-in defaults are used.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML config file
        """
        self.config_path = Path(config_path) if config_path else None

    def load(self) -> BootstrapSettings:
        """
        Load settings from the config path.

        Returns:
            Validated settings

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        if self.config_path is None:
            return BootstrapSettings()

        if not self.config_path.is_file():
            raise ConfigError(f"Configuration file does not exist: {self.config_path}")

        data = self._read_yaml(self.config_path)
        if "bootstrap" in data:
            data = data["bootstrap"] or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid configuration in {self.config_path}: expected a mapping")

        try:
            return BootstrapSettings(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid bootstrap configuration: {e}")

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except IOError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid configuration in {file_path}: expected a mapping")
        return data
