"""
PluginUpdater Server - Main FastAPI Application

This module contains the main FastAPI application for the PluginUpdater server.
It answers update check requests from plugin update checkers.
"""

import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

import database
from managers.database_manager import DatabaseManager


logger = logging.getLogger(__name__)


def SetupServerLogging(logs_dir: Path = Path("logs")) -> Path:
    """
    Configure logging to write to both console and a rotating file

    Args:
        logs_dir: Folder for log files (created if missing)

    Returns:
        Path: Log file path
    """
    logs_dir.mkdir(exist_ok=True)

    log_filename = logs_dir / f"plugin-updater-server-{datetime.now().strftime('%Y-%m-%d')}.log"

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # Console handler
            logging.StreamHandler(),
            # File handler with rotation (max 10MB per file, keep 10 backup files)
            RotatingFileHandler(
                log_filename,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=10,
                encoding='utf-8'
            )
        ]
    )

    return log_filename


# ==================== Lifespan Events ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler for startup and shutdown
    Manages logging setup and database initialization
    """
    SetupServerLogging()
    logger.info("PluginUpdater Server starting up...")

    if database.db_manager is None:
        database.db_manager = DatabaseManager()

    database.db_manager.InitializeDatabase()
    logger.info(f"Database initialized successfully: {database.db_manager.db_path}")

    logger.info("Server startup complete")

    yield

    logger.info("PluginUpdater Server shutting down...")
    database.db_manager.engine.dispose()
    logger.info("Shutdown complete")


# ==================== FastAPI Application ====================

app = FastAPI(
    title="PluginUpdater Server",
    description="Update notification server for plugins",
    version="1.0.0",
    lifespan=lifespan
)

# ==================== CORS Middleware ====================

# Update checks are made from arbitrary installations
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== Include Routers ====================

from routes import status, update

app.include_router(status.router)
app.include_router(update.router)


# ==================== Main Entry Point ====================

if __name__ == "__main__":
    """
    Run the server using uvicorn
    """
    logger.info("Starting PluginUpdater Server...")

    uvicorn.run(
        "server:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
        log_level="info"
    )
