"""
PluginUpdater Server - Plugin Release Setup Script

Publishes a plugin release to the database and marks it as the managed
plugin. This should be run by administrators when a new version is available.

Usage:
    python setup_plugin_release.py <slug> <version> <package_url> [options]

Example:
    python setup_plugin_release.py my-plugin 1.2.0 https://example.com/my-plugin-1.2.0.zip \\
        --name "My Plugin" --tested 6.4 --requires 6.0 --changelog "Bug fixes"
"""

import sys
import argparse
import logging
from datetime import datetime

from managers.database_manager import DatabaseManager
from models.database import PluginRelease


logger = logging.getLogger(__name__)


def PublishRelease(db_manager: DatabaseManager, slug: str, version: str, package: str,
                   name: str = None, author: str = "", url: str = "", tested: str = "",
                   requires: str = "", description: str = None, changelog: str = None,
                   banner_low: str = None, banner_high: str = None) -> PluginRelease:
    """
    Create or update a release and make it the managed plugin

    Args:
        db_manager: Initialized DatabaseManager
        slug: Plugin slug
        version: Released version (offered to clients as new_version)
        package: Download URL
        name: Display name (defaults to the slug)
        author, url, tested, requires: Release metadata
        description, changelog: Text for the details sections
        banner_low, banner_high: Banner image URLs

    Returns:
        PluginRelease: The stored release
    """
    session = db_manager.GetSession()

    try:
        release = session.query(PluginRelease).filter(PluginRelease.slug == slug).first()
        if release:
            logger.info(f"Updating release {slug}: {release.new_version} -> {version}")
        else:
            release = PluginRelease(slug=slug)
            session.add(release)
            logger.info(f"Creating release {slug}: {version}")

        sections = dict(release.sections or {})
        if description is not None:
            sections["description"] = description
        if changelog is not None:
            sections["changelog"] = changelog

        banners = dict(release.banners or {})
        if banner_low is not None:
            banners["low"] = banner_low
        if banner_high is not None:
            banners["high"] = banner_high

        release.name = name or release.name or slug
        release.author = author or release.author or ""
        release.version = version
        release.new_version = version
        release.package = package
        release.url = url or release.url or ""
        release.tested = tested or release.tested or ""
        release.requires = requires or release.requires or ""
        release.sections = sections
        release.banners = banners
        release.last_updated = datetime.now()

        db_manager.SetSetting(session, "managed_plugin_slug", slug)

        session.commit()
        return release

    except Exception:
        session.rollback()
        raise

    finally:
        session.close()


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Publish a plugin release to the update server")
    parser.add_argument("slug", help="Plugin slug")
    parser.add_argument("version", help="Released version")
    parser.add_argument("package", help="Download URL of the release package")
    parser.add_argument("--name", help="Plugin display name")
    parser.add_argument("--author", default="", help="Plugin author")
    parser.add_argument("--url", default="", help="Plugin homepage")
    parser.add_argument("--tested", default="", help="Highest host version tested against")
    parser.add_argument("--requires", default="", help="Minimum host version")
    parser.add_argument("--description", help="Description section text")
    parser.add_argument("--changelog", help="Changelog section text")
    parser.add_argument("--banner-low", help="Low resolution banner URL")
    parser.add_argument("--banner-high", help="High resolution banner URL")
    parser.add_argument("--db-path", help="Database path (defaults to the server's database)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    db_manager = DatabaseManager(args.db_path)
    db_manager.InitializeDatabase()

    try:
        release = PublishRelease(
            db_manager, args.slug, args.version, args.package,
            name=args.name, author=args.author, url=args.url,
            tested=args.tested, requires=args.requires,
            description=args.description, changelog=args.changelog,
            banner_low=args.banner_low, banner_high=args.banner_high
        )
    except Exception as e:
        logger.error(f"Failed to publish release: {e}")
        return 1

    print(f"Published {release.slug} {release.new_version}")
    print("Clients will be offered this version on their next update check.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
