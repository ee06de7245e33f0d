"""Filesystem and platform helpers for tfcopen."""

from .locator import find_config, CONFIG_FILE_NAME, GIT_DIR_NAME
from .opener import open_url, open_or_print_url, get_open_command

__all__ = [
    'find_config',
    'CONFIG_FILE_NAME',
    'GIT_DIR_NAME',
    'open_url',
    'open_or_print_url',
    'get_open_command',
]
