"""
PluginUpdater Client - Lifecycle Hooks

Host-side registry of update callbacks. The host holds one LifecycleHooks
instance, checkers subscribe to it, and the host runs each hook at the
matching point of its lifecycle:

- update_check: a "check all plugins" cycle started; callbacks transform
  the UpdateState in turn
- plugin_info: the details view asks about a slug; callbacks pass the
  result along, each may replace it
- upgrade_complete: an install/update cycle finished; callbacks are
  notified with the event

Author: PluginUpdater Project
"""

import logging
from typing import Any, Callable, List, Mapping, Optional

from plugin_models import UpdateState

logger = logging.getLogger(__name__)


class LifecycleHooks:
    """Named callback lists invoked by the host."""

    def __init__(self):
        self.update_check_callbacks: List[Callable] = []
        self.plugin_info_callbacks: List[Callable] = []
        self.upgrade_complete_callbacks: List[Callable] = []

    def register_update_check(self, callback: Callable[[Optional[UpdateState]], Optional[UpdateState]]):
        """Register a callback for update-check cycles."""
        self.update_check_callbacks.append(callback)
        logger.debug("Registered update check callback")

    def register_plugin_info(self, callback: Callable[[str, Any], Any]):
        """Register a callback for plugin details requests."""
        self.plugin_info_callbacks.append(callback)
        logger.debug("Registered plugin info callback")

    def register_upgrade_complete(self, callback: Callable[[Mapping[str, Any]], None]):
        """Register a callback for finished upgrade cycles."""
        self.upgrade_complete_callbacks.append(callback)
        logger.debug("Registered upgrade complete callback")

    def run_update_check(self, state: Optional[UpdateState]) -> Optional[UpdateState]:
        """
        Pass the update state through every update-check callback.

        Args:
            state: Initial update state

        Returns:
            State returned by the last callback
        """
        for callback in self.update_check_callbacks:
            state = callback(state)
        return state

    def run_plugin_info(self, requested_slug: str, default_result: Any = None) -> Any:
        """
        Ask every plugin-info callback about a slug.

        Args:
            requested_slug: Slug of the plugin being viewed
            default_result: Result if no callback answers

        Returns:
            Result after all callbacks have run
        """
        result = default_result
        for callback in self.plugin_info_callbacks:
            result = callback(requested_slug, result)
        return result

    def run_upgrade_complete(self, event: Mapping[str, Any]):
        """
        Notify every upgrade-complete callback.

        Args:
            event: Upgrade event, e.g. {"action": "update", "type": "plugin"}
        """
        for callback in self.upgrade_complete_callbacks:
            callback(event)
