"""
PluginUpdater Server - Database Models Package

This package contains all SQLAlchemy database model definitions.
All models share a common declarative base.
"""

# Import Base first
from models.database.base import Base

# Import all models
from models.database.setting import Setting
from models.database.plugin_release import PluginRelease

# Export all models and Base
__all__ = [
    'Base',
    'Setting',
    'PluginRelease',
]
