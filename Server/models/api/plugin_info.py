"""
PluginUpdater Server - Plugin Info Response Model

Returned for action "info": the full plugin details record.
"""

from typing import Dict

from pydantic import BaseModel


class PluginInfoResponse(BaseModel):
    """
    Response model for plugin information.

    sections maps free-form keys (description, changelog, ...) to text;
    banners maps size tiers ("low", "high") to image URLs.
    """
    name: str
    slug: str
    author: str = ""
    version: str
    last_updated: str = ""
    new_version: str
    url: str = ""
    package: str = ""
    tested: str = ""
    requires: str = ""
    sections: Dict[str, str] = {}
    banners: Dict[str, str] = {}
