"""
PluginUpdater Server - Update Request Errors

Exceptions raised while handling an update check request. Each carries
the HTTP status code reported to the client.
"""

from typing import Optional


class UpdateRequestError(Exception):
    """
    Base error for update request handling.

    Attributes:
        message: Message returned to the client in the "error" field
        status_code: HTTP status code (None means 500)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BadRequestError(UpdateRequestError):
    """Malformed or incomplete client request (HTTP 400)."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ServerFaultError(UpdateRequestError):
    """Unexpected server-side failure (HTTP 500)."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=500)
