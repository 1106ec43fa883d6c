"""
PluginUpdater Server - Update Request Handler

Validates update check requests and builds the response for the managed
plugin. The handler is a pure function of the request body and a catalog
snapshot; the HTTP layer only forwards its status code and body.

Request:  {"action": "version"|"info", "license_key", "domain", "version"}
Response: "version" -> {"new_version", "tested", "package"}
          "info"    -> full plugin details record
Errors:   {"error": message, "code": status_code}
"""

import json
import logging
from typing import Any, Dict, Tuple, Union

from pydantic import ValidationError

from catalog import PluginCatalog
from models.api import UpdateCheckRequest, VersionCheckResponse, PluginInfoResponse, ErrorResponse
from update_errors import UpdateRequestError, BadRequestError, ServerFaultError


# Create logger
logger = logging.getLogger(__name__)

# Keys every update check request must carry, checked in this order
REQUIRED_KEYS = ["action", "license_key", "domain", "version"]

ACTION_VERSION = "version"
ACTION_INFO = "info"


def ParseUpdateRequest(raw_body: Union[bytes, str, None]) -> UpdateCheckRequest:
    """
    Parse and validate a raw request body

    Args:
        raw_body: JSON request body

    Returns:
        UpdateCheckRequest: Validated request

    Raises:
        BadRequestError: If the body is empty, not JSON, missing a required key
                         or carries an unknown action
    """
    if isinstance(raw_body, bytes):
        try:
            raw_body = raw_body.decode('utf-8')
        except UnicodeDecodeError:
            raise BadRequestError("Invalid data")

    try:
        data = json.loads(raw_body) if raw_body else None
    except json.JSONDecodeError:
        data = None

    if not data or not isinstance(data, dict):
        raise BadRequestError("Invalid data")

    for key in REQUIRED_KEYS:
        if data.get(key) is None:
            raise BadRequestError(f"Missing required key: {key}")

    if not isinstance(data["action"], str) or data["action"] not in (ACTION_VERSION, ACTION_INFO):
        raise BadRequestError("Invalid action")

    try:
        return UpdateCheckRequest.model_validate(data)
    except ValidationError as e:
        field = e.errors()[0]["loc"][0] if e.errors() else "request"
        raise BadRequestError(f"Invalid value for key: {field}")


def BuildUpdateResponse(update_request: UpdateCheckRequest, catalog: PluginCatalog) -> Dict[str, Any]:
    """
    Build the response body for a validated request

    Args:
        update_request: Validated request
        catalog: Source of the managed plugin's details

    Returns:
        dict: Response body

    Raises:
        BadRequestError: If the action is unknown
        ServerFaultError: If the catalog has no plugin details
    """
    if update_request.action not in (ACTION_VERSION, ACTION_INFO):
        raise BadRequestError("Invalid action")

    details = catalog.GetPluginDetails()
    if not details:
        raise ServerFaultError("Plugin details unavailable")

    plugin_info = PluginInfoResponse.model_validate(details)

    if update_request.action == ACTION_VERSION:
        return VersionCheckResponse(
            new_version=plugin_info.new_version,
            tested=plugin_info.tested,
            package=plugin_info.package
        ).model_dump()

    return plugin_info.model_dump()


def HandleUpdateRequest(raw_body: Union[bytes, str, None], catalog: PluginCatalog) -> Tuple[int, Dict[str, Any]]:
    """
    Handle one update check request

    Args:
        raw_body: JSON request body
        catalog: Source of the managed plugin's details

    Returns:
        tuple: (HTTP status code, JSON-serializable response body)
    """
    try:
        update_request = ParseUpdateRequest(raw_body)
        response = BuildUpdateResponse(update_request, catalog)

        logger.info(f"Update check: action={update_request.action}, "
                    f"domain={update_request.domain}, version={update_request.version}")
        return 200, response

    except UpdateRequestError as e:
        status_code = e.status_code or 500
        logger.error(f"Plugin update error: {e.message}")
        return status_code, ErrorResponse(error=e.message, code=status_code).model_dump()

    except Exception as e:
        logger.exception(f"Plugin update error: {e}")
        return 500, ErrorResponse(error="Internal server error", code=500).model_dump()
