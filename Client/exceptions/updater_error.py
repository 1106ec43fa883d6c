"""
PluginUpdater Client - Updater Error Exception

Base exception class for all update-check errors.

Author: PluginUpdater Project
"""


class PluginUpdaterError(Exception):
    """Base exception for update checker errors."""
    pass
