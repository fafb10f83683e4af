"""
Configuration management from files, environment variables and dicts.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from copy import deepcopy
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)

ENV_PREFIX = "PATTERNS_"


class Config:
    """Configuration container with dot notation access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def __getattr__(self, key: str) -> Any:
        """Get config value using dot notation."""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key not in self._data:
            raise AttributeError(f"Config has no attribute '{key}'")

        value = self._data[key]
        if isinstance(value, dict):
            return Config(value)
        return value

    def __contains__(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with default, accepting dotted keys."""
        try:
            value = self._data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value using dot notation."""
        keys = key.split('.')
        data = self._data
        for k in keys[:-1]:
            if k not in data or not isinstance(data[k], dict):
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = value


_MISSING = object()


class ConfigManager:
    """
    Configuration assembled from files, the environment and plain dicts.

    Later loads override earlier ones key by key; nested sections are merged.
    """

    def __init__(self):
        self._config = Config()
        self.logger = get_logger(self.__class__.__name__)

    def load_from_file(self, filepath: str):
        """
        Load configuration from file (JSON or YAML).

        Args:
            filepath: Path to configuration file
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ('.yaml', '.yml', '.json'):
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(data).__name__}",
                details={'filepath': str(path)}
            )

        self._config.update(data)
        self.logger.info(f"Loaded configuration from {filepath}")

    def load_from_env(self, prefix: str = ENV_PREFIX) -> int:
        """
        Load configuration from environment variables.

        ``PATTERNS_LOGGING__LOG_LEVEL=DEBUG`` becomes ``logging.log_level``;
        a double underscore separates sections so keys may keep single ones.

        Args:
            prefix: Prefix for environment variables

        Returns:
            Number of values loaded
        """
        count = 0

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):].lower().replace('__', '.')

            # Try to parse as JSON for complex types
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            self._config.set(config_key, parsed_value)
            count += 1

        self.logger.info(f"Loaded {count} configuration values from environment")
        return count

    def load_from_dict(self, data: Dict[str, Any]):
        """Load configuration from dictionary."""
        self._config.update(data)
        self.logger.info("Loaded configuration from dictionary")

    def save_to_file(self, filepath: str, format: str = 'yaml'):
        """
        Save configuration to file.

        Args:
            filepath: Path to save configuration
            format: File format ('yaml' or 'json')
        """
        if format not in ('yaml', 'json'):
            raise ConfigurationError(f"Unsupported format: {format}")

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, 'w') as f:
                if format == 'yaml':
                    yaml.safe_dump(self._config.to_dict(), f, default_flow_style=False)
                else:
                    json.dump(self._config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        self.logger.info(f"Saved configuration to {filepath}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config.set(key, value)
        self.logger.debug(f"Set config: {key} = {value}")

    def clear(self):
        """Clear all configuration."""
        self._config = Config()
        self.logger.info("Cleared all configuration")


# Global configuration manager instance
_global_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _global_config_manager
    if _global_config_manager is None:
        _global_config_manager = ConfigManager()
    return _global_config_manager


def load_config(filepath: str):
    """Load configuration from file into global manager."""
    manager = get_config_manager()
    manager.load_from_file(filepath)


def get_config(key: str, default: Any = None) -> Any:
    """Get configuration value from global manager."""
    manager = get_config_manager()
    return manager.get(key, default)


def set_config(key: str, value: Any):
    """Set configuration value in global manager."""
    manager = get_config_manager()
    manager.set(key, value)
