"""
Config locator for tfcopen.

This module walks from a starting directory towards the filesystem root looking
for a .tfcopen marker file. A git repository root found on the way ends the
search early, with the repository directory name used as the search term.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from ..config.parser import read_config
from ..errors import (
    ConfigError,
    ConfigEmptyError,
    ConfigInvalidError,
    ConfigNotFoundError,
    ConfigReadError,
)
from ..models.config import TfcOpenConfig


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = '.tfcopen'
GIT_DIR_NAME = '.git'


def _starting_directory(start: Optional[Union[str, Path]]) -> Path:
    if start is not None:
        return Path(start).resolve()
    try:
        return Path.cwd()
    except OSError as e:
        raise ConfigError(f"error getting current directory: {e}") from e


def _load_marker(config_path: Path) -> TfcOpenConfig:
    """
    Load a marker file that is known to exist.

    Raises:
        ConfigEmptyError: If the file has zero length
        ConfigReadError: If the file cannot be read or decoded
        ConfigInvalidError: If no selector key is set
    """
    try:
        size = config_path.stat().st_size
    except OSError as e:
        raise ConfigReadError(f"error reading config: {e}", config_path) from e

    if size == 0:
        raise ConfigEmptyError(config_path)

    try:
        config = read_config(config_path)
    except ConfigReadError as e:
        raise ConfigReadError(f"error reading config: {e}", config_path) from e

    if not config.has_known_keys():
        raise ConfigInvalidError(config_path, config)

    return config


def find_config(start: Optional[Union[str, Path]] = None) -> TfcOpenConfig:
    """
    Find the configuration for the given directory.

    Each directory from start up to the filesystem root is checked first for a
    .tfcopen file and then for a .git entry.

    Args:
        start: Directory to start from (defaults to the current directory)

    Returns:
        Config decoded from the nearest marker file, or a config whose search
        term is the name of the nearest git repository root

    Raises:
        ConfigEmptyError: If the nearest marker file is empty
        ConfigInvalidError: If the nearest marker file sets no selector key
        ConfigReadError: If the nearest marker file cannot be decoded
        ConfigNotFoundError: If the root is reached without finding either
    """
    start_dir = _starting_directory(start)
    current = start_dir

    while True:
        logger.debug(f"Looking for {CONFIG_FILE_NAME} in {current}")

        config_path = current / CONFIG_FILE_NAME
        if config_path.exists():
            logger.debug(f"Found config file: {config_path}")
            return _load_marker(config_path)

        if (current / GIT_DIR_NAME).exists():
            logger.info("found git root, guessing the terraform cloud search string from its name")
            return TfcOpenConfig(search=current.name)

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigNotFoundError(start_dir)
