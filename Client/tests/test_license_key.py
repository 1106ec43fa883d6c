"""
Tests for license key sanitization in PluginUpdater Client
"""

import sys
import re
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from license_key import sanitize_license_key

ALLOWED = re.compile(r"^[A-Za-z0-9_-]*$")

SAMPLES = [
    "ABCD-1234-efgh_5678",
    "  key with spaces  ",
    "key;DROP TABLE licenses;--",
    "ключ-123",
    "tab\tnew\nline",
    "emoji-🔑-key",
    "a.b/c\\d@e",
    "",
]


def test_keeps_allowed_characters():
    """Test valid keys are unchanged"""
    assert sanitize_license_key("ABCD-1234-efgh_5678") == "ABCD-1234-efgh_5678"


def test_strips_disallowed_characters():
    """Test everything outside [A-Za-z0-9_-] is removed"""
    assert sanitize_license_key("key;DROP TABLE licenses;--") == "keyDROPTABLElicenses--"
    assert sanitize_license_key("ключ-123") == "-123"
    assert sanitize_license_key("a.b/c\\d@e") == "abcde"


def test_empty_and_none():
    """Test empty input yields empty key"""
    assert sanitize_license_key("") == ""
    assert sanitize_license_key(None) == ""


def test_result_uses_allowed_set_only():
    """Test every sanitized sample matches the allowed set"""
    for sample in SAMPLES:
        assert ALLOWED.match(sanitize_license_key(sample))


def test_sanitize_is_idempotent():
    """Test sanitizing twice equals sanitizing once"""
    for sample in SAMPLES:
        once = sanitize_license_key(sample)
        assert sanitize_license_key(once) == once
