"""
PluginUpdater Client - Transport Error Exception

Exception raised when the update server cannot be reached
(connection refused, DNS failure, timeout).

Author: PluginUpdater Project
"""

from .updater_error import PluginUpdaterError


class UpdateTransportError(PluginUpdaterError):
    """Exception for network-level failures."""
    pass
