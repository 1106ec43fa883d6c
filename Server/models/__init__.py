"""
PluginUpdater Server - Models Package

This package contains all data models for the PluginUpdater server:
- database: SQLAlchemy database models
- api: Pydantic models for the update check endpoint
"""

# Re-export all models for convenient importing
from models.database import *
from models.api import *
