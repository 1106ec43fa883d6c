"""
Tests for plugin catalogs and release publishing in PluginUpdater Server
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog import StaticCatalog, DatabaseCatalog, MANAGED_PLUGIN_SETTING
from managers.database_manager import DatabaseManager, DEFAULT_RELEASE
from models.database import Setting
from setup_plugin_release import PublishRelease, main as setup_release_main


@pytest.fixture
def db_manager(tmp_path):
    manager = DatabaseManager(str(tmp_path / "db" / "test.db"))
    manager.InitializeDatabase()
    yield manager
    manager.engine.dispose()


def test_static_catalog_returns_copies():
    """Test callers cannot modify the catalog's record"""
    catalog = StaticCatalog({"name": "A", "slug": "a", "version": "1", "new_version": "1",
                             "sections": {"description": "d"}})

    details = catalog.GetPluginDetails()
    details["sections"]["description"] = "changed"

    assert catalog.GetPluginDetails()["sections"]["description"] == "d"


def test_static_catalog_fills_last_updated():
    details = StaticCatalog({"name": "A", "slug": "a", "version": "1", "new_version": "1"}).GetPluginDetails()
    datetime.strptime(details["last_updated"], "%Y-%m-%d %H:%M:%S")


def test_database_seeds_default_release(db_manager):
    """Test a fresh database serves the default release"""
    details = DatabaseCatalog(db_manager).GetPluginDetails()

    assert details["slug"] == DEFAULT_RELEASE["slug"]
    assert details["new_version"] == DEFAULT_RELEASE["new_version"]
    assert details["sections"] == DEFAULT_RELEASE["sections"]
    assert details["banners"] == DEFAULT_RELEASE["banners"]
    datetime.strptime(details["last_updated"], "%Y-%m-%d %H:%M:%S")


def test_initialize_is_idempotent(db_manager):
    db_manager.InitializeDatabase()
    assert DatabaseCatalog(db_manager).GetPluginDetails()["slug"] == DEFAULT_RELEASE["slug"]


def test_no_managed_plugin(db_manager):
    session = db_manager.GetSession()
    try:
        session.query(Setting).filter(Setting.key == MANAGED_PLUGIN_SETTING).delete()
        session.commit()
    finally:
        session.close()

    assert DatabaseCatalog(db_manager).GetPluginDetails() is None


def test_publish_release_switches_managed_plugin(db_manager):
    """Test publishing makes the new release the one served"""
    PublishRelease(db_manager, "my-plugin", "2.0.0", "https://example.com/my-plugin-2.0.0.zip",
                   name="My Plugin", tested="6.4", changelog="Big release",
                   banner_low="https://example.com/low.jpg")

    details = DatabaseCatalog(db_manager).GetPluginDetails()

    assert details["slug"] == "my-plugin"
    assert details["name"] == "My Plugin"
    assert details["new_version"] == "2.0.0"
    assert details["tested"] == "6.4"
    assert details["sections"] == {"changelog": "Big release"}
    assert details["banners"] == {"low": "https://example.com/low.jpg"}


def test_publish_release_updates_existing(db_manager):
    """Test republishing keeps metadata that is not overridden"""
    PublishRelease(db_manager, "my-plugin", "2.0.0", "https://example.com/2.0.0.zip",
                   name="My Plugin", description="Does things")
    PublishRelease(db_manager, "my-plugin", "2.1.0", "https://example.com/2.1.0.zip",
                   changelog="Fixes")

    details = DatabaseCatalog(db_manager).GetPluginDetails()

    assert details["name"] == "My Plugin"
    assert details["new_version"] == "2.1.0"
    assert details["package"] == "https://example.com/2.1.0.zip"
    assert details["sections"] == {"description": "Does things", "changelog": "Fixes"}


def test_setup_script(tmp_path, capsys):
    db_path = str(tmp_path / "script.db")

    exit_code = setup_release_main(["cli-plugin", "3.0", "https://example.com/3.0.zip", "--db-path", db_path])

    assert exit_code == 0
    assert "Published cli-plugin 3.0" in capsys.readouterr().out
    manager = DatabaseManager(db_path)
    try:
        assert DatabaseCatalog(manager).GetPluginDetails()["new_version"] == "3.0"
    finally:
        manager.engine.dispose()
