"""
YAML marker file reader for tfcopen.

This module loads a .tfcopen file, decodes it as YAML and validates the result
into a TfcOpenConfig, turning every I/O or decoding failure into a
ConfigReadError that names the file.
"""

import re
import yaml
from pathlib import Path
from typing import Dict, Any, Union
import logging

from pydantic import ValidationError

from ..errors import ConfigReadError
from ..models.config import TfcOpenConfig


logger = logging.getLogger(__name__)


class MarkerLoader(yaml.BaseLoader):
    """
    YAML loader that keeps every scalar as its source text.

    Only plain `~`, `null` and empty values are resolved (to None); numbers,
    booleans and dates stay strings so `workspace: 0755` reads as "0755".
    """
    pass


MarkerLoader.add_implicit_resolver(
    'tag:yaml.org,2002:null',
    re.compile(r'^(?:~|null|Null|NULL|)$'),
    ['~', 'n', 'N', ''],
)
MarkerLoader.add_constructor('tag:yaml.org,2002:null', lambda loader, node: None)


def load_config_data(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load and parse a YAML marker file.

    Args:
        file_path: Path to the marker file

    Returns:
        Parsed YAML data as dictionary (empty when the file holds no document)

    Raises:
        ConfigReadError: If the file cannot be read or is not a YAML mapping
    """
    file_path = Path(file_path)
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"failed to open config file {file_path}: {e}", file_path) from e

    try:
        data = yaml.load(content, Loader=MarkerLoader)
    except yaml.YAMLError as e:
        raise ConfigReadError(f"failed to decode config file {file_path}: {e}", file_path) from e

    # Whitespace or comments only
    if data is None:
        logger.debug(f"Config file holds no YAML document: {file_path}")
        return {}

    if not isinstance(data, dict):
        raise ConfigReadError(
            f"failed to decode config file {file_path}: expected a YAML mapping, "
            f"got {type(data).__name__}",
            file_path,
        )

    return data


def read_config(file_path: Union[str, Path]) -> TfcOpenConfig:
    """
    Read the configuration from the specified file.

    Args:
        file_path: Path to the .tfcopen file

    Returns:
        The decoded TfcOpenConfig

    Raises:
        ConfigReadError: If the file is missing, malformed, or has wrongly typed values
    """
    file_path = Path(file_path)
    data = load_config_data(file_path)

    try:
        config = TfcOpenConfig.from_dict(data)
    except ValidationError as e:
        raise ConfigReadError(f"failed to decode config file {file_path}: {e}", file_path) from e

    logger.debug(f"Loaded {config} from {file_path}")
    return config
