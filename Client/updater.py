"""
PluginUpdater Client - Update Checker Module

Asks the update server whether a newer version of a plugin exists and
what metadata describes it. Responses are cached for 12 hours.

Failures never reach the host: every network or response problem is
logged and the host's data is passed through unchanged.

Author: PluginUpdater Project
"""

import hashlib
import json
import logging
from dataclasses import replace
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from api import UpdateServerAPI, DEFAULT_TIMEOUT
from cache import TransientCache, MemoryTransientCache, MISSING
from exceptions import PluginUpdaterError, UpdateResponseError, UpdaterConfigError
from license_key import sanitize_license_key
from plugin_models import PluginIdentity, UpdateDescriptor, UpdateState
from versioning import is_version_newer

logger = logging.getLogger(__name__)

# Cache duration in seconds
CACHE_DURATION = 12 * 60 * 60

CACHE_KEY_PREFIX = "plugin_updater_"

ACTION_VERSION = "version"
ACTION_INFO = "info"

REQUEST_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json"
}


def build_cache_key(plugin_id: str) -> str:
    """Derive the cache key for a plugin identifier."""
    return CACHE_KEY_PREFIX + hashlib.md5(plugin_id.encode('utf-8')).hexdigest()


class PluginUpdateChecker:
    """
    Checks a remote update server for new versions of one plugin.

    Responsibilities:
    - Issue "version" and "info" requests, cache-aside
    - Compare installed and remote versions
    - Add an update descriptor to the host's update state
    - Serve plugin metadata for the host's details view
    - Drop the cached response after an update completes
    """

    def __init__(self, identity: PluginIdentity, license_key: str, update_path: str,
                 cache_enabled: bool = True, cache: Optional[TransientCache] = None,
                 transport: Optional[UpdateServerAPI] = None):
        """
        Initialize update checker.

        Args:
            identity: Identity of the plugin being checked
            license_key: Raw license key (sanitized before use)
            update_path: Update server endpoint URL
            cache_enabled: Whether responses are cached
            cache: Cache implementation (defaults to in-memory)
            transport: HTTP transport (defaults to UpdateServerAPI)

        Raises:
            UpdaterConfigError: If update_path is not an http(s) URL
        """
        self.identity = replace(identity, license_key=sanitize_license_key(license_key))
        self.update_path = self._normalize_update_path(update_path)
        self.cache_enabled = cache_enabled
        self.cache = cache if cache is not None else MemoryTransientCache()
        self.transport = transport if transport is not None else UpdateServerAPI()
        self.cache_key = build_cache_key(self.identity.plugin_id)

        logger.debug(f"Update checker for {self.identity.plugin_id} "
                     f"(version {self.identity.current_version}) -> {self.update_path}")

    @property
    def plugin_id(self) -> str:
        return self.identity.plugin_id

    @property
    def slug(self) -> str:
        return self.identity.slug

    @property
    def license_key(self) -> str:
        return self.identity.license_key

    @staticmethod
    def _normalize_update_path(update_path: str) -> str:
        update_path = (update_path or "").strip()
        parsed = urlparse(update_path)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise UpdaterConfigError(f"Invalid update server URL: {update_path!r}")
        return update_path

    def register_hooks(self, hooks):
        """
        Subscribe this checker to the host's lifecycle hooks.

        Args:
            hooks: LifecycleHooks instance
        """
        hooks.register_update_check(self.check_for_update)
        hooks.register_plugin_info(self.get_plugin_info)
        hooks.register_upgrade_complete(self.purge_cache)

    # ==================== Server Requests ====================

    def _make_request(self, action: str) -> Any:
        """
        Fetch data for an action, using the cache when possible.

        Args:
            action: "version" or "info"

        Returns:
            Parsed JSON response, or None if no data could be obtained
        """
        if self.cache_enabled:
            cached = self.cache.get(self.cache_key)
            if cached is not MISSING:
                logger.debug(f"Using cached update data for {self.plugin_id}")
                return cached

        payload = {
            "action": action,
            "license_key": self.license_key,
            "domain": self.identity.domain,
            "version": self.identity.current_version
        }

        try:
            response = self.transport.send(
                self.update_path,
                method="POST",
                headers=dict(REQUEST_HEADERS),
                body=json.dumps(payload),
                timeout=DEFAULT_TIMEOUT
            )

            if response.status_code != 200:
                raise UpdateResponseError(f"Invalid response code: {response.status_code}",
                                          status_code=response.status_code)

            if not response.body:
                raise UpdateResponseError("Empty response body", status_code=response.status_code)

            try:
                data = json.loads(response.body)
            except json.JSONDecodeError:
                raise UpdateResponseError("Invalid JSON response", status_code=response.status_code)

        except PluginUpdaterError as e:
            logger.error(f"Plugin updater error: {e}")
            return None

        if self.cache_enabled:
            self.cache.set(self.cache_key, data, CACHE_DURATION)

        return data

    # ==================== Host Entry Points ====================

    def check_for_update(self, state: Optional[UpdateState]) -> Optional[UpdateState]:
        """
        Add an update descriptor to the host's update state if a newer
        version is available.

        Args:
            state: Host update state. If None or nothing was checked, this
                   call does nothing.

        Returns:
            The input state, or a copy with this plugin's descriptor added
        """
        if state is None or not state.checked:
            return state

        remote_data = self._make_request(ACTION_VERSION)
        if not remote_data or not isinstance(remote_data, Mapping):
            return state

        new_version = remote_data.get("new_version")
        if isinstance(new_version, (int, float)) and not isinstance(new_version, bool):
            new_version = str(new_version)
        if new_version is not None and not isinstance(new_version, str):
            logger.warning(f"Ignoring non-string new_version for {self.plugin_id}: {new_version!r}")
            return state

        if not new_version or not is_version_newer(self.identity.current_version, new_version):
            logger.debug(f"{self.plugin_id} is up to date ({self.identity.current_version})")
            return state

        descriptor = UpdateDescriptor(
            slug=self.slug,
            plugin=self.plugin_id,
            new_version=new_version,
            tested=remote_data.get("tested") or "",
            package=remote_data.get("package") or "",
            url=remote_data.get("url") or ""
        )

        logger.info(f"Update available for {self.plugin_id}: "
                    f"{self.identity.current_version} -> {new_version}")
        return state.with_update(self.plugin_id, descriptor)

    def get_plugin_info(self, requested_slug: str, default_result: Any = None) -> Any:
        """
        Return plugin metadata for this plugin's details view.

        Args:
            requested_slug: Slug the host asks about
            default_result: Value returned when this checker does not answer

        Returns:
            Metadata dict, or default_result for other slugs and failures
        """
        if requested_slug != self.slug:
            return default_result

        remote_data = self._make_request(ACTION_INFO)
        if not isinstance(remote_data, Mapping):
            return default_result

        # Plain JSON copy so callers cannot alias the cached value
        return json.loads(json.dumps(remote_data))

    def purge_cache(self, event: Optional[Mapping[str, Any]]):
        """
        Drop the cached response after a plugin update completes.

        Args:
            event: Upgrade event, e.g. {"action": "update", "type": "plugin"}
        """
        if not self.cache_enabled or not isinstance(event, Mapping):
            return

        if event.get("action") == "update" and event.get("type") == "plugin":
            self.cache.delete(self.cache_key)
            logger.info(f"Purged cached update data for {self.plugin_id}")
