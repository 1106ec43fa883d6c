"""
PluginUpdater Server - Version Check Response Model

Returned for action "version".
"""

from pydantic import BaseModel


class VersionCheckResponse(BaseModel):
    """
    Response model for a version check.

    Carries only what the client needs to decide whether to offer an update.
    """
    new_version: str  # Latest version available on server
    tested: str = ""  # Highest host version tested against
    package: str = ""  # Download URL
