"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from factom.config.schema import FactomSettings


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".factom" / "config.json"


def load_config(config_path: Path | None = None) -> FactomSettings:
    """
    Load configuration from file, or from the environment alone.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded settings. Values in the file take precedence over FACTOM_* env vars.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config must be a JSON object")
            settings = FactomSettings(**convert_keys(data))
            logger.debug(f"Loaded factom config from {path}")
            return settings
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to fall back to defaults."
            ) from e

    return FactomSettings()


def save_config(settings: FactomSettings, config_path: Path | None = None) -> Path:
    """
    Save configuration to file.

    Args:
        settings: Settings to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = convert_to_camel(settings.model_dump(exclude_none=True))

    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    return path


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
