"""Operator configuration loading."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from pydantic import ValidationError

from garmgcp.errors import ConfigError
from garmgcp.models.config import ProviderConfig


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GARM_GCP_CONFIG"
DEFAULT_CONFIG_PATH = Path("./garm-provider-gcp.yaml")


class ConfigManager:
    """Loads the operator configuration file."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Without an explicit path, GARM_GCP_CONFIG is used, then the default.
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        self.config_path = Path(config_path)
        self.yaml = YAML(typ="safe")
        self.config: Optional[ProviderConfig] = None

    def load(self) -> ProviderConfig:
        """Load and validate the configuration file."""
        if not self.config_path.exists():
            raise ConfigError(f"Config file not found: {self.config_path}")

        data = self._read_yaml(self.config_path)
        try:
            self.config = ProviderConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {self.config_path}: {e}") from e

        logger.debug(f"Loaded config: {self.config_path}")
        return self.config

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            data = self.yaml.load(file_path.read_text())
        except YAMLError as e:
            raise ConfigError(f"Failed to parse {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {file_path} must be a mapping")
        return data


def load_config(config_path: Optional[Union[str, Path]] = None) -> ProviderConfig:
    """Load the operator configuration."""
    return ConfigManager(config_path).load()
