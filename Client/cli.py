"""
PluginUpdater Client - CLI Mode Module

Implements command-line operations for checking a plugin against its
update server. Uses the stored configuration and license key, and logs
to a timestamped file.

Author: PluginUpdater Project
"""

import sys
import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional

from config import ConfigManager
from cache import FileTransientCache
from api import UpdateServerAPI
from exceptions import PluginUpdaterError, UpdaterConfigError
from plugin_models import PluginIdentity, UpdateState, domain_from_url
from updater import PluginUpdateChecker


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

# Event sent to the checker when purging from the command line
PLUGIN_UPDATE_EVENT = {"action": "update", "type": "plugin"}


def setup_cli_logging(config_manager: ConfigManager) -> Path:
    """
    Setup logging for CLI mode with timestamped log file.

    Creates log file with format: plugin-updater-YYYY-MM-DD-HH-MM-SS.log
    in a "logs" subdirectory next to config.json.

    Args:
        config_manager: ConfigManager instance for log settings

    Returns:
        Path to the created log file
    """
    log_level = config_manager.get("log_level", "INFO")

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_dir = config_manager.base_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"plugin-updater-{timestamp}.log"

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )

    logger = logging.getLogger(__name__)
    logger.info(f"PluginUpdater CLI Mode - Log file: {log_file}")
    logger.info(f"Log level: {log_level}")

    return log_file


def cleanup_old_logs(config_manager: ConfigManager, current_log: Path) -> int:
    """
    Delete log files older than retention period.

    Args:
        config_manager: ConfigManager instance for retention settings
        current_log: Path to current log file (don't delete this)

    Returns:
        Number of deleted files
    """
    logger = logging.getLogger(__name__)
    retention_days = config_manager.get("log_retention_days", 30)

    if retention_days <= 0:
        return 0  # Retention disabled

    cutoff_time = datetime.now().timestamp() - (retention_days * 86400)

    deleted_count = 0
    for log_file in current_log.parent.glob("plugin-updater-*.log"):
        if log_file == current_log:
            continue

        try:
            if log_file.stat().st_mtime < cutoff_time:
                log_file.unlink()
                deleted_count += 1
        except OSError as e:
            logger.warning(f"Failed to delete old log file {log_file}: {e}")

    if deleted_count > 0:
        logger.info(f"Deleted {deleted_count} old log file(s)")

    return deleted_count


def build_checker(config_manager: ConfigManager, license_key: Optional[str] = None) -> PluginUpdateChecker:
    """
    Create an update checker from configuration.

    Args:
        config_manager: Loaded ConfigManager
        license_key: License key override (defaults to the credential store)

    Returns:
        Configured PluginUpdateChecker

    Raises:
        UpdaterConfigError: If plugin_id or plugin_version is missing
    """
    plugin_id = config_manager.get("plugin_id")
    plugin_version = config_manager.get("plugin_version")
    if not plugin_id or not plugin_version:
        raise UpdaterConfigError("plugin_id and plugin_version must be set in config.json")

    if license_key is None:
        license_key = config_manager.get_license_key() or ""

    identity = PluginIdentity(
        plugin_id=plugin_id,
        current_version=str(plugin_version),
        domain=domain_from_url(config_manager.get("home_url"))
    )

    return PluginUpdateChecker(
        identity,
        license_key,
        config_manager.get("server_url"),
        cache_enabled=bool(config_manager.get("cache_enabled", True)),
        cache=FileTransientCache(config_manager.get_cache_path()),
        transport=UpdateServerAPI(verify_ssl=config_manager.get("verify_ssl", True))
    )


def run_check(checker: PluginUpdateChecker) -> int:
    """Run a version check and print the update descriptor, if any."""
    logger = logging.getLogger(__name__)

    state = UpdateState(checked={checker.plugin_id: checker.identity.current_version})
    result = checker.check_for_update(state)

    descriptor = result.response.get(checker.plugin_id)
    if descriptor is None:
        logger.info(f"No update available for {checker.plugin_id}")
        print(json.dumps({"update_available": False}))
    else:
        print(json.dumps({"update_available": True, "update": descriptor.to_dict()}, indent=2))

    return EXIT_SUCCESS


def run_info(checker: PluginUpdateChecker) -> int:
    """Fetch and print plugin metadata."""
    logger = logging.getLogger(__name__)

    info = checker.get_plugin_info(checker.slug)
    if info is None:
        logger.error(f"No plugin information available for {checker.slug}")
        return EXIT_FAILURE

    print(json.dumps(info, indent=2))
    return EXIT_SUCCESS


def run_cli_operation(operation: str, license_key: Optional[str] = None,
                      config_manager: Optional[ConfigManager] = None) -> int:
    """
    Execute CLI operation.

    Args:
        operation: "check", "info", "purge" or "set-license"
        license_key: License key (required for "set-license", override otherwise)
        config_manager: Optional ConfigManager (defaults to the working directory)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    logger = None

    try:
        config_mgr = config_manager or ConfigManager()
        config_mgr.load_config()
        log_file = setup_cli_logging(config_mgr)
        logger = logging.getLogger(__name__)

        cleanup_old_logs(config_mgr, log_file)

        if operation == "set-license":
            if not license_key:
                logger.error("A license key is required: set-license --license-key KEY")
                return EXIT_CONFIG_ERROR
            config_mgr.store_license_key(license_key)
            return EXIT_SUCCESS

        checker = build_checker(config_mgr, license_key)

        if operation == "check":
            return run_check(checker)
        elif operation == "info":
            return run_info(checker)
        elif operation == "purge":
            checker.purge_cache(PLUGIN_UPDATE_EVENT)
            return EXIT_SUCCESS
        else:
            logger.error(f"Unknown operation: {operation}")
            return EXIT_FAILURE

    except UpdaterConfigError as e:
        if logger:
            logger.error(f"Configuration error: {e}")
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except PluginUpdaterError as e:
        if logger:
            logger.error(f"Updater error: {e}")
        else:
            print(f"Updater error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        if logger:
            logger.warning("Operation cancelled by user (Ctrl+C)")
        else:
            print("\nOperation cancelled by user", file=sys.stderr)
        return EXIT_FAILURE
