"""
Configuration management for satlab.

Configuration is a nested dictionary of defaults merged with an optional YAML
or JSON file. Nested keys can be read and written with dot notation
(e.g. ``"generator.num_clauses"``).
"""

import copy
import json
import logging
import os
from typing import Any, Optional

import yaml

from satlab.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


class SatLabConfig:
    """
    Configuration manager for satlab.
    Handles loading, merging, and accessing configuration parameters.
    """

    DEFAULT_CONFIG = {
        "generator": {
            "num_variables": 20,
            "num_clauses": 85,
            "clause_length": 3,
            "seed": None,
        },
        "logging": {
            "level": "INFO",
            "file": None,
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file (YAML or JSON)

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                extension or does not hold a mapping
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_path:
            self._load_config_file(config_path)

    def _load_config_file(self, config_path: str) -> None:
        if not os.path.exists(config_path):
            raise ConfigurationError("Configuration file not found", config_path)

        if not config_path.endswith(_YAML_SUFFIXES + (".json",)):
            raise ConfigurationError("Unsupported configuration file format", config_path)

        try:
            with open(config_path, encoding="utf-8") as f:
                if config_path.endswith(".json"):
                    file_config = json.load(f)
                else:
                    file_config = yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError("Could not parse configuration file", config_path) from e

        # An empty YAML file loads as None
        if file_config is None:
            file_config = {}
        if not isinstance(file_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping", config_path)

        self._merge_dicts(self.config, file_config)
        logger.debug(f"Loaded configuration from {config_path}")

    def _merge_dicts(self, target: dict, source: dict) -> None:
        """
        Recursively merge two dictionaries.

        Args:
            target: Target dictionary to merge into
            source: Source dictionary to merge from
        """
        for key, value in source.items():
            if (
                key in target
                and isinstance(target[key], dict)
                and isinstance(value, dict)
            ):
                self._merge_dicts(target[key], value)
            else:
                target[key] = value

    def update(self, config_dict: dict[str, Any]) -> None:
        self._merge_dicts(self.config, config_dict)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.
        Supports dot notation for nested keys (e.g., "generator.seed").

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config
        try:
            for k in key.split("."):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by key, creating intermediate sections.

        Args:
            key: Configuration key in dot notation
            value: Value to set
        """
        keys = key.split(".")
        target = self.config
        for k in keys[:-1]:
            if not isinstance(target.get(k), dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.config)

    def save(self, file_path: str) -> None:
        """
        Save the configuration to a YAML or JSON file.

        Raises:
            ConfigurationError: If the extension is not supported
        """
        if not file_path.endswith(_YAML_SUFFIXES + (".json",)):
            raise ConfigurationError("Unsupported file format for configuration", file_path)

        os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            if file_path.endswith(".json"):
                json.dump(self.config, f, indent=2)
            else:
                yaml.safe_dump(self.config, f, default_flow_style=False)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


def load_config(config_path: Optional[str] = None) -> SatLabConfig:
    """
    Load configuration from a file, or the defaults when no path is given.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration instance
    """
    return SatLabConfig(config_path)
