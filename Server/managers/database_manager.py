"""
PluginUpdater Server - Database Manager

This module manages database connection, initialization, and operations.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from models.database import Base, Setting, PluginRelease


logger = logging.getLogger(__name__)

# Default database location, overridable with PLUGIN_UPDATER_DB_PATH
DEFAULT_DB_PATH = "database/plugin_updater.db"

# Release published on first run so a fresh server answers requests
DEFAULT_RELEASE = {
    "slug": "sample-plugin",
    "name": "Sample Plugin",
    "author": "<a href='https://example.com'>Sample Author</a>",
    "version": "1.1.0",
    "new_version": "1.1.0",
    "url": "https://example.com/plugin-page",
    "package": "https://example.com/downloads/sample-plugin-1.1.0.zip",
    "tested": "6.3",
    "requires": "6.0",
    "sections": {
        "description": "Plugin description",
        "changelog": "Version 1.1.0 changes..."
    },
    "banners": {
        "low": "https://example.com/uploads/updater/banner-772x250.jpg",
        "high": "https://example.com/uploads/updater/banner-1544x500.jpg"
    }
}


class DatabaseManager:
    """
    Manages database connection, initialization, and operations
    """

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize database manager

        Args:
            db_path: Path to SQLite database file (defaults to
                     PLUGIN_UPDATER_DB_PATH or database/plugin_updater.db)
        """
        self.db_path = db_path or os.environ.get("PLUGIN_UPDATER_DB_PATH") or DEFAULT_DB_PATH

        # Ensure database directory exists
        db_dir = Path(self.db_path).parent
        if db_dir and str(db_dir) != '.':
            db_dir.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{self.db_path}", echo=False)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def InitializeDatabase(self):
        """
        Initialize the database with all tables and default data
        Creates tables if they don't exist and publishes the default
        release when no release exists yet.
        """
        Base.metadata.create_all(bind=self.engine)

        session = self.GetSession()

        try:
            if session.query(PluginRelease).count() == 0:
                self.PopulateDefaultRelease(session)

            session.commit()

        except Exception:
            session.rollback()
            raise

        finally:
            session.close()

    def PopulateDefaultRelease(self, session):
        """
        Add the default release and mark it as the managed plugin

        Args:
            session: SQLAlchemy session
        """
        session.add(PluginRelease(**DEFAULT_RELEASE))
        self.SetSetting(session, "managed_plugin_slug", DEFAULT_RELEASE["slug"])
        logger.info(f"Added default release: {DEFAULT_RELEASE['slug']} {DEFAULT_RELEASE['new_version']}")

    @staticmethod
    def SetSetting(session, key: str, value: str):
        """
        Create or update a setting (caller commits)

        Args:
            session: SQLAlchemy session
            key: Setting key
            value: Setting value
        """
        setting = session.query(Setting).filter(Setting.key == key).first()
        if setting:
            setting.value = value
        else:
            session.add(Setting(key=key, value=value))

    def GetSession(self):
        """
        Get a new database session

        Returns:
            Session: SQLAlchemy session
        """
        return self.SessionLocal()
