"""
PluginUpdater Client - File-Backed Transient Cache

Persists cache entries to a JSON file so cached update responses survive
process restarts. Values must be JSON-serializable.

File format:
    {"entries": {"<key>": {"value": ..., "expires_at": <unix time>}}}

Author: PluginUpdater Project
"""

import json
import logging
import time
from pathlib import Path
from typing import Callable, Dict, Any

from .transient_cache import TransientCache, CacheEntry

logger = logging.getLogger(__name__)


class FileTransientCache(TransientCache):
    """TTL cache stored in a single JSON file."""

    def __init__(self, cache_file, clock: Callable[[], float] = time.time):
        """
        Initialize file cache.

        Args:
            cache_file: Path to the JSON cache file (created on first write)
            clock: Function returning the current UNIX time
        """
        super().__init__(clock)
        self.cache_file = Path(cache_file)

    def _read_entries(self) -> Dict[str, Any]:
        """
        Read raw entries from disk.

        A missing or unreadable file is treated as an empty cache.
        """
        if not self.cache_file.exists():
            return {}

        try:
            with open(self.cache_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable cache file {self.cache_file}: {e}")
            return {}

        entries = data.get("entries") if isinstance(data, dict) else None
        return entries if isinstance(entries, dict) else {}

    def _write_entries(self, entries: Dict[str, Any]):
        """
        Write raw entries to disk.

        A failed write is logged and the cache keeps working uncached.
        """
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.cache_file, 'w', encoding='utf-8') as f:
                json.dump({"entries": entries}, f, indent=2)
        except OSError as e:
            logger.warning(f"Failed to write cache file {self.cache_file}: {e}")

    def _load_entry(self, key: str):
        raw = self._read_entries().get(key)
        if not isinstance(raw, dict) or "expires_at" not in raw:
            return None

        try:
            expires_at = float(raw["expires_at"])
        except (TypeError, ValueError):
            return None

        return CacheEntry(key=key, value=raw.get("value"), expires_at=expires_at)

    def _store_entry(self, entry: CacheEntry):
        entries = self._read_entries()
        entries[entry.key] = {"value": entry.value, "expires_at": entry.expires_at}
        self._write_entries(entries)

    def _remove_entry(self, key: str):
        entries = self._read_entries()
        if key in entries:
            del entries[key]
            self._write_entries(entries)
