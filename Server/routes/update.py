"""
PluginUpdater Server - Update Check Endpoint

This module contains the endpoint that plugin update checkers call.
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from catalog import PluginCatalog, DatabaseCatalog
from responder import HandleUpdateRequest


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


def GetCatalog() -> PluginCatalog:
    """
    Dependency providing the plugin catalog

    Returns:
        PluginCatalog: Catalog backed by the shared database
    """
    from database import db_manager

    return DatabaseCatalog(db_manager)


# ==================== Update Check Endpoint ====================

@router.post("/check-update", tags=["Update"])
async def check_update(request: Request, catalog: PluginCatalog = Depends(GetCatalog)):
    """
    Answer an update check request

    The body is read raw so that malformed JSON and missing keys are
    reported with the update protocol's error body rather than FastAPI's
    validation format.

    Args:
        request: Incoming request with JSON body
        catalog: Source of the managed plugin's details

    Returns:
        JSONResponse: Response body with the handler's status code
    """
    raw_body = await request.body()
    status_code, content = HandleUpdateRequest(raw_body, catalog)
    return JSONResponse(status_code=status_code, content=content)
