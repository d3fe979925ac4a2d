"""Configuration file loading and merging."""

import logging
from pathlib import Path

import yaml

from arise_setup.config.schema import DEFAULT_CONFIG, SetupConfig

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".arise"
CONFIG_FILENAME = "config.yaml"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.arise/config.yaml."""
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def get_project_config_path(project_root: Path) -> Path:
    """Get path to project config: <project>/.arise/config.yaml."""
    return project_root / CONFIG_DIRNAME / CONFIG_FILENAME


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if missing, empty, unreadable or invalid."""
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", path)
        return None
    result: dict[str, object] = data
    return result


def _load_layer(path: Path) -> SetupConfig | None:
    data = load_yaml_config(path)
    if not data:
        return None
    try:
        layer = SetupConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning("Ignoring config %s: %s", path, e)
        return None
    logger.debug("Loaded config from %s", path)
    return layer


def load_config(project_root: Path) -> SetupConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.arise/config.yaml)
    3. Project config (<project>/.arise/config.yaml)

    CLI options are layered on top by the caller.
    """
    config = DEFAULT_CONFIG
    for path in (get_home_config_path(), get_project_config_path(project_root)):
        layer = _load_layer(path)
        if layer is not None:
            config = config.merge(layer)
    return config

