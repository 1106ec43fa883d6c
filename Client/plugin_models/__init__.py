"""
PluginUpdater Client - Models Package

Contains data models used by the update checker.

Author: PluginUpdater Project
"""

from .plugin_identity import PluginIdentity, domain_from_url
from .update_state import UpdateDescriptor, UpdateState

__all__ = [
    'PluginIdentity',
    'domain_from_url',
    'UpdateDescriptor',
    'UpdateState'
]
