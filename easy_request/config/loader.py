"""Configuration loader for easy-request.

This module loads request_config.yaml and provides a singleton config
object for easy access throughout the package.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

from ..exceptions import ConfigurationError
from ..logging_config import get_module_logger

logger = get_module_logger("config")

CONFIG_DIR_ENV = "EASY_REQUEST_CONFIG_DIR"


class Config:
    """Configuration manager that loads and provides access to request settings."""

    config_files = {
        "request": "request_config.yaml",
    }

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_dir = None
        else:
            self._configs = {}
            self._config_dir = self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path:
        """Find the config directory, honoring EASY_REQUEST_CONFIG_DIR."""
        override = os.environ.get(CONFIG_DIR_ENV)
        if override:
            config_dir = Path(override)
            if not config_dir.is_dir():
                raise ConfigurationError(
                    f"directory {config_dir} does not exist", config_key=CONFIG_DIR_ENV
                )
            return config_dir

        # Bundled defaults live next to this file
        return Path(__file__).resolve().parent

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        for key, filename in self.config_files.items():
            config_path = self._config_dir / filename
            if not config_path.exists():
                logger.warning(f"Config file {filename} not found at {config_path}")
                self._configs[key] = {}
                continue

            with open(config_path, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f)

            # Every file is a mapping with its section name at the top level
            section = loaded_config.get(key) if isinstance(loaded_config, dict) else None
            if not isinstance(section, dict):
                logger.warning(
                    f"Config file {filename} must contain a '{key}' mapping, "
                    f"got {type(section).__name__}. Using empty config."
                )
                self._configs[key] = {}
            else:
                self._configs[key] = section

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "request.defaults.timeout")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("request.defaults.timeout")
            30
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_required(self, path: str) -> Any:
        """Get a configuration value that must be present.

        Raises:
            ConfigurationError: If the path is missing or set to null
        """
        value = self.get(path)
        if value is None:
            raise ConfigurationError("required value is missing", config_key=path)
        return value

    @property
    def request(self) -> dict[str, Any]:
        """Get request configuration."""
        # Safe cast: _load_all_configs only stores dicts
        return cast(dict[str, Any], self._configs.get("request", {}))

    def reload(self):
        """Reload all configuration files."""
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()
