"""
Configuration management for the pattern catalog.
"""
from .config_manager import (
    Config,
    ConfigManager,
    get_config_manager,
    load_config,
    get_config,
    set_config
)

__all__ = [
    'Config',
    'ConfigManager',
    'get_config_manager',
    'load_config',
    'get_config',
    'set_config',
]
