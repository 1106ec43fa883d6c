"""
PluginUpdater Server - Error Response Model

Body returned with every non-200 update check response.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    code: int
