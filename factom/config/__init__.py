"""Configuration module for the factom client."""

from factom.config.loader import get_config_path, load_config, save_config
from factom.config.schema import FactomSettings

__all__ = ["FactomSettings", "load_config", "save_config", "get_config_path"]
