"""
Configuration package for bracketeer

Provides application settings via environment variables using pydantic-settings.
"""

from .settings import appsettings, AppSettings, NESTING_DEPTH_CEILING

__all__ = ["appsettings", "AppSettings", "NESTING_DEPTH_CEILING"]
