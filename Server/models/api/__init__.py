"""
PluginUpdater Server - API Models Package

This package contains Pydantic models for the update check endpoint.
"""

from models.api.update_request import UpdateCheckRequest
from models.api.version_response import VersionCheckResponse
from models.api.plugin_info import PluginInfoResponse
from models.api.error_response import ErrorResponse

__all__ = [
    'UpdateCheckRequest',
    'VersionCheckResponse',
    'PluginInfoResponse',
    'ErrorResponse',
]
