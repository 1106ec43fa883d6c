"""
PluginUpdater Client - Configuration Manager

Handles loading and saving client configuration from/to config.json.
Keeps the license key in the OS credential store.

Author: PluginUpdater Project
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

# Configure logging
logger = logging.getLogger(__name__)

# Service name used for OS credential store entries
KEYRING_SERVICE = "PluginUpdater"

# Default configuration values
DEFAULT_CONFIG = {
    "server_url": "https://localhost:8000/check-update",
    "verify_ssl": True,
    "plugin_id": None,  # e.g. "my-plugin/my-plugin.py"
    "plugin_version": None,
    "home_url": None,  # Installation URL; its hostname is sent as "domain"
    "cache_enabled": True,
    "cache_file": "cache/update_cache.json",  # Relative to the config folder
    "log_level": "INFO",
    "log_retention_days": 30
}


class ConfigManager:
    """
    Settings for checking one plugin against its update server.

    config.json names the plugin (plugin_id, plugin_version), the
    installation's home_url and the update endpoint. The license key lives
    in the OS credential store, keyed by plugin_id.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            base_dir: Folder holding config.json (defaults to the executable's
                      folder when frozen, otherwise the current directory)
        """
        if base_dir is None:
            if getattr(sys, 'frozen', False):
                # Running as compiled executable
                base_dir = Path(sys.executable).parent
            else:
                # Running as script
                base_dir = Path.cwd()

        self.base_dir = Path(base_dir)
        self.config_file = self.base_dir / "config.json"
        self.config: Dict[str, Any] = {}

    def load_config(self) -> Dict[str, Any]:
        """
        Load config.json, filling in defaults for keys it does not set.
        Writes a default file on first run.

        Returns:
            Configuration dictionary
        """
        if self.config_file.exists():
            logger.debug(f"Loading configuration from {self.config_file}")
            with open(self.config_file, 'r') as f:
                self.config = json.load(f)
            # Merge with defaults for any missing keys
            for key, value in DEFAULT_CONFIG.items():
                if key not in self.config:
                    self.config[key] = value
            logger.info("Configuration loaded successfully")
        else:
            logger.info(f"Configuration file not found, creating default at {self.config_file}")
            self.config = DEFAULT_CONFIG.copy()
            self.save_config()

        return self.config

    def save_config(self):
        """Save current configuration to config.json."""
        logger.debug(f"Saving configuration to {self.config_file}")
        self.base_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w') as f:
            json.dump(self.config, f, indent=2)
        logger.debug("Configuration saved successfully")

    def get(self, key: str, default=None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def get_cache_path(self) -> Path:
        """
        Resolve the cache file location.

        Returns:
            Absolute cache file path (relative paths resolve against base_dir)
        """
        cache_file = Path(self.get("cache_file") or DEFAULT_CONFIG["cache_file"])
        if not cache_file.is_absolute():
            cache_file = self.base_dir / cache_file
        return cache_file

    def store_license_key(self, license_key: str):
        """
        Store the license key in the OS credential store.

        Args:
            license_key: License key for the configured plugin
        """
        import keyring

        plugin_id = self.get("plugin_id")
        logger.info(f"Storing license key for plugin: {plugin_id}")
        keyring.set_password(KEYRING_SERVICE, plugin_id or "default", license_key)
        logger.debug("License key stored successfully")

    def get_license_key(self) -> Optional[str]:
        """
        Retrieve the license key from the OS credential store.

        Returns:
            License key or None if not found
        """
        import keyring

        plugin_id = self.get("plugin_id")
        license_key = keyring.get_password(KEYRING_SERVICE, plugin_id or "default")
        if not license_key:
            logger.warning(f"No license key found in credential store for plugin: {plugin_id}")
            return None

        logger.debug(f"License key retrieved for plugin: {plugin_id}")
        return license_key
