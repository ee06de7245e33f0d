"""
URL construction for tfcopen.

Resolves the organization, maps the config selector to a path fragment and
composes the final Terraform Cloud URL.
"""

import os
import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from .config.settings import DEFAULT_ORG_ENV, Settings, load_settings
from .errors import ConfigError, OrgUnresolvedError
from .models.config import ProjectPathStyle, TfcOpenConfig
from .tools.locator import find_config


logger = logging.getLogger(__name__)

REGISTRY_URI = "/registry/private/modules"


def resolve_org(config: Optional[TfcOpenConfig],
                environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Determine the organization for the URL.

    The config's org wins; otherwise TFCOPEN_DEFAULT_ORG is used.

    Raises:
        OrgUnresolvedError: If neither source provides a non-empty org
    """
    if config is not None and config.org:
        return config.org

    if environ is None:
        environ = os.environ
    org = environ.get(DEFAULT_ORG_ENV, "").strip()
    if org:
        logger.debug(f"Using org from {DEFAULT_ORG_ENV}: {org}")
        return org

    raise OrgUnresolvedError(DEFAULT_ORG_ENV)


def build_workspaces_uri(config: TfcOpenConfig,
                         project_style: ProjectPathStyle = ProjectPathStyle.WORKSPACES) -> str:
    """
    Map the config selector to a path fragment.

    Values are inserted as-is; special characters are not escaped.
    """
    selected = config.selector()
    if selected is None:
        return ""

    field, value = selected
    if field == 'workspace':
        return f"/workspaces/{value}"
    if field == 'search':
        return f"/workspaces?search={value}"
    if project_style is ProjectPathStyle.PROJECT:
        return f"/projects/{value}"
    return f"/projects/{value}/workspaces"


def get_url(registry: bool = False,
            start: Optional[Union[str, Path]] = None,
            settings: Optional[Settings] = None) -> str:
    """
    Compose the Terraform Cloud URL for the current directory.

    Args:
        registry: Target the private module registry instead of workspaces
        start: Directory to start the config search from
        settings: Settings to use (read from the environment when None)

    Raises:
        ConfigError: If no usable config is found (ignored in registry mode)
        OrgUnresolvedError: If no org can be determined
    """
    if settings is None:
        settings = load_settings()

    config: Optional[TfcOpenConfig]
    try:
        config = find_config(start)
    except ConfigError as e:
        if not registry:
            raise
        # The registry only needs an org, which a selector-less file may still carry
        config = getattr(e, 'config', None)
        logger.debug(f"Ignoring config error for registry URL: {e}")

    org = resolve_org(config, {DEFAULT_ORG_ENV: settings.default_org})

    if registry:
        uri = REGISTRY_URI
    else:
        uri = build_workspaces_uri(config, settings.project_path_style)

    return f"{settings.base_url}{org}{uri}"
