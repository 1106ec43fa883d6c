"""
PluginUpdater Server - Plugin Catalog

Read-only sources of the managed plugin's details record. The server
manages a single plugin; which one is chosen by the "managed_plugin_slug"
setting when details come from the database.
"""

import copy
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from models.database import PluginRelease, Setting


logger = logging.getLogger(__name__)

# Timestamp format for the "last_updated" field
LAST_UPDATED_FORMAT = "%Y-%m-%d %H:%M:%S"

MANAGED_PLUGIN_SETTING = "managed_plugin_slug"


class PluginCatalog:
    """
    Base class for plugin details sources
    """

    def GetPluginDetails(self) -> Optional[Dict[str, Any]]:
        """
        Get the details record of the managed plugin

        Returns:
            dict: Plugin details, or None if no plugin is configured
        """
        raise NotImplementedError


class StaticCatalog(PluginCatalog):
    """
    Catalog backed by a fixed details record (tests and single-file deployments)
    """

    def __init__(self, details: Dict[str, Any]):
        """
        Initialize static catalog

        Args:
            details: Plugin details record
        """
        self.details = copy.deepcopy(details)

    def GetPluginDetails(self) -> Optional[Dict[str, Any]]:
        details = copy.deepcopy(self.details)
        if not details.get("last_updated"):
            details["last_updated"] = datetime.now().strftime(LAST_UPDATED_FORMAT)
        return details


class DatabaseCatalog(PluginCatalog):
    """
    Catalog backed by the plugin_releases table
    """

    def __init__(self, db_manager):
        """
        Initialize database catalog

        Args:
            db_manager: DatabaseManager instance
        """
        self.db_manager = db_manager

    def GetPluginDetails(self) -> Optional[Dict[str, Any]]:
        session = self.db_manager.GetSession()

        try:
            slug_setting = session.query(Setting).filter(Setting.key == MANAGED_PLUGIN_SETTING).first()
            if not slug_setting:
                logger.warning(f"No {MANAGED_PLUGIN_SETTING} setting found in database")
                return None

            release = session.query(PluginRelease).filter(PluginRelease.slug == slug_setting.value).first()
            if not release:
                logger.warning(f"No release found for managed plugin '{slug_setting.value}'")
                return None

            return ReleaseToDetails(release)

        finally:
            session.close()


def ReleaseToDetails(release: PluginRelease) -> Dict[str, Any]:
    """
    Convert a release row to a plugin details record

    Args:
        release: PluginRelease row

    Returns:
        dict: Plugin details record
    """
    last_updated = release.last_updated or datetime.now()

    return {
        "name": release.name,
        "slug": release.slug,
        "author": release.author or "",
        "version": release.version,
        "last_updated": last_updated.strftime(LAST_UPDATED_FORMAT),
        "new_version": release.new_version,
        "url": release.url or "",
        "package": release.package or "",
        "tested": release.tested or "",
        "requires": release.requires or "",
        "sections": dict(release.sections or {}),
        "banners": dict(release.banners or {})
    }
