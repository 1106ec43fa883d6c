"""
PluginUpdater Client - Exceptions Package

Contains all exception classes for the PluginUpdater client.

Author: PluginUpdater Project
"""

from .updater_error import PluginUpdaterError
from .transport_error import UpdateTransportError
from .response_error import UpdateResponseError
from .config_error import UpdaterConfigError

__all__ = [
    'PluginUpdaterError',
    'UpdateTransportError',
    'UpdateResponseError',
    'UpdaterConfigError'
]
