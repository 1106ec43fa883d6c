"""
PluginUpdater Client - License Key Handling

License keys are opaque tokens passed through to the update server.
Only letters, digits, underscore and hyphen are kept.

Author: PluginUpdater Project
"""

import re

_DISALLOWED = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize_license_key(key: str) -> str:
    """
    Strip every character outside [A-Za-z0-9_-].

    Args:
        key: Raw license key (None is treated as empty)

    Returns:
        Sanitized key
    """
    if not key:
        return ""
    return _DISALLOWED.sub("", key)
