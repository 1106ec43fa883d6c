"""
PluginUpdater Client - Plugin Identity Model

Immutable identity of the component whose updates are being checked.

Author: PluginUpdater Project
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse


@dataclass(frozen=True)
class PluginIdentity:
    """
    Identity of a managed plugin.

    Attributes:
    - plugin_id: Plugin identifier relative to the plugins folder
      (e.g., "my-plugin/my-plugin.py")
    - current_version: Installed version string
    - license_key: Opaque client credential
    - domain: Installation identifier, usually the site hostname
    """
    plugin_id: str
    current_version: str
    license_key: str = ""
    domain: str = ""

    @property
    def slug(self) -> str:
        """Leading path segment of the plugin identifier."""
        head = self.plugin_id.replace("\\", "/").strip("/").split("/", 1)[0]
        return head or self.plugin_id


def domain_from_url(url: Optional[str]) -> str:
    """
    Extract the hostname from an installation's home URL.

    Args:
        url: Home URL (e.g., "https://example.com/blog")

    Returns:
        Hostname ("example.com"), or empty string if none can be parsed
    """
    if not url:
        return ""
    parsed = urlparse(url if "://" in url else f"//{url}")
    return parsed.hostname or ""
