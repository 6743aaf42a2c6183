"""
YAML configuration for loading a text dataset.
"""
import os
import yaml
from typing import Any, Dict
from textloader.exceptions import ArgumentError

DEFAULT_CONFIG = {
    'separator': '\t',
    'label_column': None,
    'weight_column': None,
    'name_column': None,
    'label_map_file': None,
    'cache': True,
}

COLUMN_KEYS = ['label_column', 'weight_column', 'name_column']


def validate_config(config):
    if not isinstance(config, dict):
        raise ArgumentError("Config must be a mapping of option names to values")
    required_keys = ['data_file']
    missing = [k for k in required_keys if k not in config]
    if missing:
        raise ArgumentError(f"Missing required config keys: {missing}")
    unknown = [k for k in config if k not in DEFAULT_CONFIG and k not in required_keys]
    if unknown:
        raise ArgumentError(f"Unknown config keys: {unknown}")
    for key in ['data_file', 'label_map_file']:
        value = config.get(key)
        if key == 'label_map_file' and value is None:
            continue
        if not isinstance(value, str) or not value.strip():
            raise ArgumentError(f"{key} must be a non-empty path, got {value!r}")
    separator = config.get('separator', DEFAULT_CONFIG['separator'])
    if not isinstance(separator, str) or len(separator) != 1:
        raise ArgumentError(f"separator must be a single character, got {separator!r}")
    for key in COLUMN_KEYS:
        value = config.get(key)
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
            raise ArgumentError(f"{key} must be a non-negative integer, got {value!r}")
    if not isinstance(config.get('cache', True), bool):
        raise ArgumentError(f"cache must be true or false, got {config['cache']!r}")


def load_config(config_path: str) -> Dict[str, Any]:
    """Read and validate a YAML config. Relative paths resolve against the config's directory."""
    if not os.path.exists(config_path):
        raise ArgumentError(f"Config file {config_path} does not exist.")
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    validate_config(config)
    base_dir = os.path.dirname(os.path.abspath(config_path))
    for key in ['data_file', 'label_map_file']:
        if config.get(key) and not os.path.isabs(config[key]):
            config[key] = os.path.join(base_dir, config[key])
    return config


def loader_options(config: Dict[str, Any]) -> Dict[str, Any]:
    options = dict(DEFAULT_CONFIG)
    options.update({k: v for k, v in config.items() if k in DEFAULT_CONFIG})
    return options
