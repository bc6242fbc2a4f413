"""
Smoothie configuration.
"""

from smoothie.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    load_config,
    load_yaml_file,
)
from smoothie.config.schema import SmoothieConfig

__all__ = [
    "ConfigurationError",
    "SmoothieConfig",
    "apply_env_overrides",
    "load_config",
    "load_yaml_file",
]
