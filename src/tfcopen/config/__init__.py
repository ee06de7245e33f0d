"""
Configuration package for tfcopen.

This package provides marker file parsing and environment-driven settings.
"""

from .parser import read_config, load_config_data
from .settings import (
    Settings,
    load_settings,
    TFC_BASE_URL,
    DEFAULT_ORG_ENV,
    PROJECT_PATH_ENV,
)

__all__ = [
    'read_config',
    'load_config_data',
    'Settings',
    'load_settings',
    'TFC_BASE_URL',
    'DEFAULT_ORG_ENV',
    'PROJECT_PATH_ENV',
]
