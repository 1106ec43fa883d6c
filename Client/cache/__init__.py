"""
PluginUpdater Client - Cache Package

TTL caches used for cache-aside update requests.

Author: PluginUpdater Project
"""

from .transient_cache import TransientCache, MemoryTransientCache, CacheEntry, MISSING
from .file_cache import FileTransientCache

__all__ = [
    'TransientCache',
    'MemoryTransientCache',
    'FileTransientCache',
    'CacheEntry',
    'MISSING'
]
