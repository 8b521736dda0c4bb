"""
Configuration for the database generator.

Loads a YAML file and merges it over the default values.
"""
from __future__ import annotations
import copy
import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .algorithms.selector import STRATEGIES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "database": "hygdata_v3.csv",
    "output": "database.csv",
    "template": None,
    "template_output": None,
    "array_name": "star_database",
    "header": True,
    "columns": {
        "mag": "mag",
        "ra": "ra",
        "dec": "dec",
    },
    "preprocessor": {
        "fov": 10.0,
        "cutoff_mag": 4.0,
        "pilot_sets": 7,
        "strategy": "bound",
        "descending": True,
        "skip_after_pilot": False,
    },
}


class ConfigError(ValueError):
    pass


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file with fallback to defaults.

    Args:
        config_path: Path to config file. If None or missing, defaults are used.

    Returns:
        Validated configuration dictionary.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path is None:
        return validate_config(config)

    config_path = Path(config_path)
    if not config_path.exists():
        logger.info("No config file found at %s, using defaults.", config_path)
        return validate_config(config)

    try:
        with open(config_path, "r") as file:
            file_config = yaml.safe_load(file)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"could not load config file {config_path}: {e}") from e

    if file_config is not None:
        if not isinstance(file_config, dict):
            raise ConfigError(f"config file {config_path} must hold a mapping")
        config = _merge_configs(config, file_config)
        logger.info("Loaded configuration from: %s", config_path)

    return validate_config(config)


def _merge_configs(default: Dict, override: Dict) -> Dict:
    """Recursively merge configuration dictionaries."""
    result = default.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    pre = config["preprocessor"]

    try:
        pre["fov"] = float(pre["fov"])
        pre["cutoff_mag"] = float(pre["cutoff_mag"])
        pre["pilot_sets"] = int(pre["pilot_sets"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid preprocessor value: {e}") from e

    if pre["fov"] <= 0:
        raise ConfigError(f"fov must be positive, got {pre['fov']}")
    if pre["pilot_sets"] < 3:
        raise ConfigError(f"pilot_sets must be at least 3, got {pre['pilot_sets']}")
    if pre["strategy"] not in STRATEGIES:
        raise ConfigError(f"unknown strategy {pre['strategy']!r}, expected one of {sorted(STRATEGIES)}")

    return config
