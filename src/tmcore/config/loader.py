"""YAML settings loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union
from pydantic import ValidationError
from .schema import TMSettings

class ConfigLoadError(Exception):
    """Exception raised when a settings file cannot be read or validated."""
    pass

def _validate(data: Any, source: str) -> TMSettings:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Settings file must contain a YAML mapping, got {type(data)}")

    try:
        return TMSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Settings validation failed for {source}: {e}")

def load_settings(path: Union[str, Path]) -> TMSettings:
    """
    Load translation memory settings from a YAML file.

    Args:
        path: Path to YAML settings file

    Returns:
        TMSettings: Validated settings (missing keys take their defaults)

    Raises:
        ConfigLoadError: If the file cannot be read or the settings are invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Settings file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read settings file {path}: {e}")

    return _validate(data, str(path))

def load_settings_from_string(yaml_content: str) -> TMSettings:
    """
    Load translation memory settings from a YAML string.

    Args:
        yaml_content: YAML content as string

    Returns:
        TMSettings: Validated settings

    Raises:
        ConfigLoadError: If the YAML is malformed or the settings are invalid
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}")

    return _validate(data, "<string>")
