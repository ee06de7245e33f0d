"""
Data models for tfcopen.

This module contains the configuration record read from .tfcopen marker files.
"""

from .config import TfcOpenConfig, ProjectPathStyle, SELECTOR_FIELDS

__all__ = ['TfcOpenConfig', 'ProjectPathStyle', 'SELECTOR_FIELDS']
