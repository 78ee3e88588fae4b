"""
Configuration module for plainvalue.

Uses pydantic-settings for environment variable loading.
"""

from plainvalue.config.settings import Settings, find_project_root
from plainvalue.config.sources import ConfigFileError

__all__ = ["ConfigFileError", "Settings", "find_project_root"]
