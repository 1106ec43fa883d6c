"""
PluginUpdater Client - Response Error Exception

Exception raised when the update server answers with something the
checker cannot use: a non-200 status, an empty body or invalid JSON.

Author: PluginUpdater Project
"""

from .updater_error import PluginUpdaterError


class UpdateResponseError(PluginUpdaterError):
    """Exception for unusable server responses."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
