"""
Configuration loader for YAML check sets.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import DoctorConfig


logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Loads and validates a check set from a YAML file.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML file
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[DoctorConfig] = None

    @property
    def config(self) -> Optional[DoctorConfig]:
        return self._config

    def load(self) -> DoctorConfig:
        """
        Load the configuration file.

        Returns:
            The validated configuration

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if self.config_path is None:
            raise ConfigError("No configuration path specified")
        if not self.config_path.is_file():
            raise ConfigError(f"Configuration file does not exist: {self.config_path}")

        data = self._read_yaml(self.config_path)
        self._config = self.parse(data, source=self.config_path)
        logger.debug("Loaded configuration from %s", self.config_path)
        return self._config

    @staticmethod
    def parse(data: Dict[str, Any], source: Optional[Path] = None) -> DoctorConfig:
        """Validate already parsed configuration data."""
        origin = f" in {source}" if source else ""
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration{origin} must be a mapping")
        try:
            return DoctorConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration{origin}: {e}")

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except (IOError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")


def load_config(config_path: Union[str, Path]) -> DoctorConfig:
    """Load a check set from a YAML file."""
    return ConfigLoader(config_path).load()
