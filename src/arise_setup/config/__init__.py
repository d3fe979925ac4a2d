"""Configuration loading."""

from arise_setup.config.loader import (
    get_home_config_path,
    get_project_config_path,
    load_config,
)
from arise_setup.config.schema import DEFAULT_CONFIG, SetupConfig

__all__ = [
    "DEFAULT_CONFIG",
    "SetupConfig",
    "get_home_config_path",
    "get_project_config_path",
    "load_config",
]
