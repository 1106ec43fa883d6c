"""
PluginUpdater Client - Configuration Error Exception

Exception raised for invalid checker configuration.

Author: PluginUpdater Project
"""

from .updater_error import PluginUpdaterError


class UpdaterConfigError(PluginUpdaterError):
    """Exception for configuration errors."""
    pass
