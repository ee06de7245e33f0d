"""
Environment-driven settings for tfcopen.
"""

import os
from typing import Mapping, Optional, Any

from pydantic import BaseModel, Field, field_validator

from ..errors import SettingsError
from ..models.config import ProjectPathStyle


TFC_BASE_URL = "https://app.terraform.io/app/"
DEFAULT_ORG_ENV = "TFCOPEN_DEFAULT_ORG"
PROJECT_PATH_ENV = "TFCOPEN_PROJECT_PATH"


class Settings(BaseModel):
    """
    Process-wide settings read from the environment.

    Attributes:
        default_org: Organization used when the config does not name one
        project_path_style: URI template used for the project selector
        base_url: Terraform Cloud web UI prefix
    """

    default_org: str = Field("", description="Fallback organization")
    project_path_style: ProjectPathStyle = Field(
        ProjectPathStyle.WORKSPACES, description="URI template for projects"
    )
    base_url: str = Field(TFC_BASE_URL, description="Terraform Cloud web UI prefix")

    @field_validator('default_org', mode='before')
    @classmethod
    def strip_org(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator('project_path_style', mode='before')
    @classmethod
    def validate_project_path_style(cls, v) -> ProjectPathStyle:
        """Validate and convert the project path style to enum."""
        if isinstance(v, str):
            try:
                return ProjectPathStyle(v.strip().lower())
            except ValueError:
                valid = ", ".join(style.value for style in ProjectPathStyle)
                raise ValueError(f"Invalid project path style: {v} (expected one of {valid})")
        return v


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of os.environ

    Raises:
        SettingsError: If a variable holds an unusable value
    """
    if environ is None:
        environ = os.environ

    data = {'default_org': environ.get(DEFAULT_ORG_ENV, "")}
    style = environ.get(PROJECT_PATH_ENV, "").strip()
    if style:
        data['project_path_style'] = style

    try:
        return Settings.model_validate(data)
    except ValueError as e:
        raise SettingsError(f"invalid value for {PROJECT_PATH_ENV}: {style!r}") from e
