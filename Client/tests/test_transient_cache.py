"""
Tests for TTL caches in PluginUpdater Client

Tests expiry, lazy eviction and falsy values for the in-memory and
file-backed caches.
"""

import sys
import json
import logging
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cache import MemoryTransientCache, FileTransientCache, MISSING


class FakeClock:
    """Manually advanced clock"""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture(params=["memory", "file"])
def clock_and_cache(request, tmp_path):
    clock = FakeClock()
    if request.param == "memory":
        cache = MemoryTransientCache(clock=clock)
    else:
        cache = FileTransientCache(tmp_path / "cache.json", clock=clock)
    return clock, cache


def test_get_missing_key(clock_and_cache):
    """Test unknown keys return MISSING"""
    _, cache = clock_and_cache
    assert cache.get("nope") is MISSING


def test_set_then_get(clock_and_cache):
    """Test stored values are returned before expiry"""
    clock, cache = clock_and_cache
    cache.set("key", {"new_version": "1.1.0"}, 60)
    clock.advance(59)
    assert cache.get("key") == {"new_version": "1.1.0"}


def test_expired_entry_is_a_miss(clock_and_cache):
    """Test reads at or after expires_at behave as misses"""
    clock, cache = clock_and_cache
    cache.set("key", "value", 60)
    clock.advance(60)
    assert cache.get("key") is MISSING


def test_falsy_values_are_hits(clock_and_cache):
    """Test cached falsy values are distinguishable from absence"""
    _, cache = clock_and_cache
    cache.set("empty", {}, 60)
    cache.set("zero", 0, 60)
    assert cache.get("empty") == {}
    assert cache.get("empty") is not MISSING
    assert cache.get("zero") == 0


def test_delete(clock_and_cache):
    """Test deleting present and absent keys"""
    _, cache = clock_and_cache
    cache.set("key", "value", 60)
    cache.delete("key")
    cache.delete("never-set")
    assert cache.get("key") is MISSING


def test_memory_cache_evicts_lazily():
    """Test expired entries stay stored until looked up"""
    clock = FakeClock()
    cache = MemoryTransientCache(clock=clock)
    cache.set("key", "value", 10)
    clock.advance(20)

    assert "key" in cache
    assert cache.get("key") is MISSING
    assert "key" not in cache


def test_file_cache_survives_new_instance(tmp_path):
    """Test entries persist across cache instances"""
    clock = FakeClock()
    FileTransientCache(tmp_path / "c.json", clock=clock).set("key", ["a", 1], 60)

    reopened = FileTransientCache(tmp_path / "c.json", clock=clock)
    assert reopened.get("key") == ["a", 1]


def test_file_cache_ignores_corrupt_file(tmp_path):
    """Test unreadable cache files behave as empty"""
    cache_file = tmp_path / "c.json"
    cache_file.write_text("{not json", encoding="utf-8")
    cache = FileTransientCache(cache_file)

    assert cache.get("key") is MISSING

    cache.set("key", "value", 60)
    assert json.loads(cache_file.read_text(encoding="utf-8"))["entries"]["key"]["value"] == "value"


def test_file_cache_unwritable_path_is_logged(tmp_path, caplog):
    """Test write failures are logged instead of raised"""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder", encoding="utf-8")
    cache = FileTransientCache(blocker / "c.json")

    with caplog.at_level(logging.WARNING):
        cache.set("key", "value", 60)
        cache.delete("key")

    assert "Failed to write cache file" in caplog.text
    assert cache.get("key") is MISSING
