"""
PluginUpdater Client - API Package

This package contains the HTTP transport used to reach the update server.
"""

from .update_api import UpdateServerAPI, TransportResponse, DEFAULT_TIMEOUT

__all__ = ['UpdateServerAPI', 'TransportResponse', 'DEFAULT_TIMEOUT']
