"""
Configuration data model for tfcopen.

This module defines the record decoded from a .tfcopen marker file (or guessed
from a git repository root) and the URI template variants for projects.
"""

from typing import Dict, Optional, Any, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


SELECTOR_FIELDS = ('workspace', 'search', 'project')


class ProjectPathStyle(Enum):
    """Supported URI templates for the project selector."""
    WORKSPACES = "workspaces"
    PROJECT = "project"


class TfcOpenConfig(BaseModel):
    """
    Configuration values parsed from a .tfcopen file.

    All fields are optional. When several selectors are set the URI builder
    uses workspace first, then search, then project.

    Attributes:
        workspace: Terraform Cloud workspace name
        search: Search term for the workspace list
        project: Terraform Cloud project identifier
        org: Terraform Cloud organization name
    """

    model_config = ConfigDict(frozen=True, extra='ignore')

    workspace: str = Field("", description="Workspace name")
    search: str = Field("", description="Workspace search term")
    project: str = Field("", description="Project identifier")
    org: str = Field("", description="Organization name")

    @field_validator('workspace', 'search', 'project', 'org', mode='before')
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat YAML nulls as unset."""
        if v is None:
            return ""
        return v

    def has_known_keys(self) -> bool:
        """Check if any selector field (workspace, search, project) is set."""
        return any(getattr(self, name) for name in SELECTOR_FIELDS)

    def selector(self) -> Optional[Tuple[str, str]]:
        """Get the (field, value) pair used to build the URI, by precedence."""
        for name in SELECTOR_FIELDS:
            value = getattr(self, name)
            if value:
                return name, value
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TfcOpenConfig':
        """Create a TfcOpenConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"{name}={getattr(self, name)!r}" for name in (*SELECTOR_FIELDS, 'org')
                 if getattr(self, name)]
        return f"TfcOpenConfig({', '.join(parts)})"
