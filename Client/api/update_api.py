"""
PluginUpdater Client - HTTP Transport Module

Sends requests to the update server and returns the raw status code and
body. Interpreting the response (status, emptiness, JSON validity) is the
caller's job; this module only turns network failures into exceptions.

Author: PluginUpdater Project
"""

import logging
import requests
from dataclasses import dataclass
from typing import Optional, Dict

from exceptions import UpdateTransportError

# Configure logging
logger = logging.getLogger(__name__)

# Default timeout for update server requests (seconds)
DEFAULT_TIMEOUT = 15


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response: status code and decoded body text."""
    status_code: int
    body: str


class UpdateServerAPI:
    """
    Blocking HTTP transport for update server requests.

    Responsibilities:
    - Send a request with headers, body and timeout
    - Reuse TCP connections through a requests session
    - Raise UpdateTransportError on connection errors and timeouts
    """

    def __init__(self, verify_ssl: bool = True, session: Optional[requests.Session] = None):
        """
        Initialize transport.

        Args:
            verify_ssl: Whether to verify SSL certificates
            session: Optional pre-configured requests session
        """
        self.verify_ssl = verify_ssl
        # Use session for connection pooling to avoid TCP handshake overhead on each request
        self.session = session or requests.Session()
        logger.debug(f"Initialized update transport (SSL verification: {self.verify_ssl})")

    def close(self):
        """
        Close the session and release resources.
        """
        if self.session:
            self.session.close()
            logger.debug("Update transport session closed")

    def send(self, url: str, method: str = "POST", headers: Optional[Dict[str, str]] = None,
             body: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> TransportResponse:
        """
        Send a request to the update server.

        Args:
            url: Endpoint URL
            method: HTTP method
            headers: Request headers
            body: Encoded request body
            timeout: Seconds before the request is abandoned

        Returns:
            TransportResponse with status code and body text

        Raises:
            UpdateTransportError: If the server cannot be reached or times out
        """
        logger.debug(f"Update request: {method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                headers=headers or {},
                data=body.encode('utf-8') if body is not None else None,
                verify=self.verify_ssl,
                timeout=timeout
            )
        except requests.exceptions.ConnectionError as e:
            raise UpdateTransportError(f"Cannot connect to update server at {url}: {e}")
        except requests.exceptions.Timeout:
            raise UpdateTransportError(f"Request to {url} timed out after {timeout}s")
        except requests.exceptions.RequestException as e:
            raise UpdateTransportError(f"Request error: {str(e)}")

        logger.debug(f"Update server responded with status {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=response.text)
