"""
PluginUpdater Server - PluginRelease Database Model

PluginRelease model for storing the current release record of a plugin.
One row per plugin slug; publishing a new release updates the row.
"""

from sqlalchemy import Column, String, DateTime, JSON
from datetime import datetime, timezone

from models.database.base import Base


class PluginRelease(Base):
    """
    Plugin releases table - metadata served to update checkers
    """
    __tablename__ = "plugin_releases"

    slug = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    author = Column(String, nullable=True)
    version = Column(String, nullable=False)  # Version described by this record
    new_version = Column(String, nullable=False)  # Version offered to clients
    url = Column(String, nullable=True)  # Plugin homepage
    package = Column(String, nullable=True)  # Download URL
    tested = Column(String, nullable=True)  # Highest host version tested against
    requires = Column(String, nullable=True)  # Minimum host version
    sections = Column(JSON, nullable=True)  # e.g. {"description": ..., "changelog": ...}
    banners = Column(JSON, nullable=True)  # {"low": url, "high": url}
    last_updated = Column(DateTime, nullable=True)  # None means "now" when served
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
