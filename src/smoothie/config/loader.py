"""
Configuration loader for Smoothie.

Loads and merges configuration from multiple sources:
1. Default values
2. Project config (<project>/.smoothie.yaml)
3. Environment variables (SMOOTHIE_*)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from smoothie.config.schema import SmoothieConfig
from smoothie.storage.paths import get_project_config_path

ENV_PREFIX = "SMOOTHIE_"

# Read by storage.paths, not part of the schema
_RESERVED_ENV = {"SMOOTHIE_PROJECT"}


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary (empty if the file does not exist).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"{path} must contain a YAML mapping")
    return content


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    SMOOTHIE_EDITOR=cursor sets config["editor"] = "cursor".

    Args:
        config: Configuration dictionary.

    Returns:
        A new dictionary with environment overrides applied.
    """
    result = dict(config)

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV:
            continue
        result[key[len(ENV_PREFIX) :].lower()] = value

    return result


def load_config(project_root: Path, skip_env: bool = False) -> SmoothieConfig:
    """
    Load and merge configuration from all sources.

    Args:
        project_root: Project whose .smoothie.yaml should be read.
        skip_env: Skip environment variable overrides.

    Returns:
        Validated configuration.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict = load_yaml_file(get_project_config_path(project_root))

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    if isinstance(config_dict.get("log_level"), str):
        config_dict["log_level"] = config_dict["log_level"].upper()

    try:
        return SmoothieConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
