"""
PluginUpdater Client - Configuration Package

Contains the configuration manager and default settings.

Author: PluginUpdater Project
"""

from .config_manager import ConfigManager, DEFAULT_CONFIG, KEYRING_SERVICE

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'KEYRING_SERVICE'
]
