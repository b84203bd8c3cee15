"""Configuration module for loading and accessing request settings."""

from ..exceptions import ConfigurationError
from .loader import CONFIG_DIR_ENV, Config, config

__all__ = ["CONFIG_DIR_ENV", "Config", "ConfigurationError", "config"]
