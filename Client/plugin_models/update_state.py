"""
PluginUpdater Client - Update State Models

UpdateState is the host's "available updates" record that the checker
transforms. UpdateDescriptor announces one available newer version.

Author: PluginUpdater Project
"""

from dataclasses import dataclass, field, asdict, replace
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class UpdateDescriptor:
    """
    Structured record announcing an available newer version.

    Field names follow the wire format so the descriptor can be handed
    to the host as a plain dict.
    """
    slug: str
    plugin: str
    new_version: str
    tested: str = ""
    package: str = ""
    url: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class UpdateState:
    """
    Snapshot of the host's update-check cycle.

    Attributes:
    - checked: Installed versions keyed by plugin identifier. Empty means
      no check cycle is running.
    - response: Available updates keyed by plugin identifier
    - last_checked: Optional host timestamp of the cycle
    """
    checked: Dict[str, str] = field(default_factory=dict)
    response: Dict[str, UpdateDescriptor] = field(default_factory=dict)
    last_checked: Optional[float] = None

    def with_update(self, plugin_id: str, descriptor: UpdateDescriptor) -> "UpdateState":
        """
        Return a copy of this state with one entry added or replaced.

        The receiver is left untouched.
        """
        response = dict(self.response)
        response[plugin_id] = descriptor
        return replace(self, response=response)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "checked": dict(self.checked),
            "response": {key: value.to_dict() for key, value in self.response.items()},
            "last_checked": self.last_checked
        }
