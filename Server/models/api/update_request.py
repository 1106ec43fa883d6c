"""
PluginUpdater Server - Update Check Request Model

Pydantic model for the update check request body.
"""

from pydantic import BaseModel, field_validator


class UpdateCheckRequest(BaseModel):
    """Request model for the update check endpoint"""

    action: str  # "version" or "info"
    license_key: str
    domain: str
    version: str  # Version installed on the client

    @field_validator("license_key", "domain", "version", mode="before")
    @classmethod
    def _scalar_to_str(cls, value):
        # Any JSON scalar is accepted; objects and arrays are not
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value
