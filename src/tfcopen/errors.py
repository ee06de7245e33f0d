"""
Exception hierarchy for tfcopen.

Every failure on the path from locating a config file to composing the URL is
raised as a TfcOpenError subclass; the CLI reports the message and exits.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.config import TfcOpenConfig


class TfcOpenError(Exception):
    """Base class for all tfcopen errors."""
    pass


class ConfigError(TfcOpenError):
    """Raised when no usable configuration can be located or read."""
    pass


class ConfigNotFoundError(ConfigError):
    """Raised when the upward search reaches the filesystem root."""

    def __init__(self, start: Optional[Path] = None):
        self.start = start
        where = f" from {start}" if start is not None else ""
        super().__init__(
            f"reached the filesystem root{where} without finding a .tfcopen file "
            f"or git repository. cannot continue"
        )


class ConfigEmptyError(ConfigError):
    """Raised when a marker file exists but has zero length."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"config file found at {path} but it is empty. please add configuration keys"
        )


class ConfigInvalidError(ConfigError):
    """
    Raised when a marker file decodes but sets none of the selector keys.

    The decoded config is kept on the error because its org may still be
    enough for callers that do not need a selector.
    """

    def __init__(self, path: Path, config: "TfcOpenConfig"):
        self.path = path
        self.config = config
        super().__init__(
            f"config file found at {path} but contains none of the expected keys "
            f"(workspace, search, project). please check for typos"
        )


class ConfigReadError(ConfigError):
    """Raised when a marker file cannot be opened or decoded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class SettingsError(TfcOpenError):
    """Raised when an environment setting has an unusable value."""
    pass


class OrgUnresolvedError(TfcOpenError):
    """Raised when neither the config nor the environment names an org."""

    def __init__(self, env_var: str = "TFCOPEN_DEFAULT_ORG"):
        self.env_var = env_var
        super().__init__(
            f"no org was found in any config file and the {env_var} environment "
            f"variable is not set. we cannot generate a link without knowing this"
        )
