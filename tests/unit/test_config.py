"""
Unit tests for the configuration data model.

Tests field defaults, null handling, selector precedence and the
settings read from environment variables.
"""

import pytest
from pydantic import ValidationError

from tfcopen.config.settings import (
    Settings,
    load_settings,
    TFC_BASE_URL,
    DEFAULT_ORG_ENV,
    PROJECT_PATH_ENV,
)
from tfcopen.errors import SettingsError
from tfcopen.models.config import TfcOpenConfig, ProjectPathStyle


class TestTfcOpenConfig:
    """Test cases for TfcOpenConfig."""

    def test_default_config(self):
        """Test that every field defaults to an empty string."""
        config = TfcOpenConfig()

        assert config.workspace == ""
        assert config.search == ""
        assert config.project == ""
        assert config.org == ""

    def test_none_values_become_empty(self):
        """Test that YAML nulls are treated as unset."""
        config = TfcOpenConfig.from_dict({'workspace': None, 'org': None})

        assert config.workspace == ""
        assert config.org == ""

    def test_non_string_rejected(self):
        """Test that values must already be text."""
        with pytest.raises(ValidationError):
            TfcOpenConfig.from_dict({'project': 42})

    def test_unknown_keys_ignored(self):
        """Test that unrecognized keys do not fail validation."""
        config = TfcOpenConfig.from_dict({'workspce': 'typo', 'org': 'acme'})

        assert config.org == "acme"
        assert not config.has_known_keys()

    def test_wrong_type_rejected(self):
        """Test that non-scalar values are rejected."""
        with pytest.raises(ValidationError):
            TfcOpenConfig.from_dict({'workspace': ['a', 'b']})

    def test_frozen(self):
        """Test that the config cannot be modified after construction."""
        config = TfcOpenConfig(workspace="ws")

        with pytest.raises(ValidationError):
            config.workspace = "other"

    @pytest.mark.parametrize("kwargs,expected", [
        ({'workspace': 'ws'}, True),
        ({'search': 'foo'}, True),
        ({'project': 'bar'}, True),
        ({'org': 'acme'}, False),
        ({}, False),
    ])
    def test_has_known_keys(self, kwargs, expected):
        """Test detection of selector fields."""
        assert TfcOpenConfig(**kwargs).has_known_keys() is expected

    def test_selector_precedence(self):
        """Test that workspace beats search, which beats project."""
        assert TfcOpenConfig(workspace="ws", search="s", project="p").selector() == ('workspace', 'ws')
        assert TfcOpenConfig(search="s", project="p").selector() == ('search', 's')
        assert TfcOpenConfig(project="p").selector() == ('project', 'p')
        assert TfcOpenConfig(org="acme").selector() is None

    def test_str_lists_set_fields(self):
        """Test string representation only mentions set fields."""
        text = str(TfcOpenConfig(search="net", org="acme"))

        assert "search='net'" in text
        assert "org='acme'" in text
        assert "workspace" not in text


class TestSettings:
    """Test cases for environment settings."""

    def test_defaults(self):
        """Test settings with an empty environment."""
        settings = load_settings({})

        assert settings.default_org == ""
        assert settings.project_path_style == ProjectPathStyle.WORKSPACES
        assert settings.base_url == TFC_BASE_URL

    def test_default_org_from_env(self):
        """Test reading the fallback org."""
        settings = load_settings({DEFAULT_ORG_ENV: " envorg "})
        assert settings.default_org == "envorg"

    def test_project_path_style_from_env(self):
        """Test selecting the short project template."""
        settings = load_settings({PROJECT_PATH_ENV: "Project"})
        assert settings.project_path_style == ProjectPathStyle.PROJECT

    def test_invalid_project_path_style(self):
        """Test that an unknown template name is reported."""
        with pytest.raises(SettingsError, match=PROJECT_PATH_ENV):
            load_settings({PROJECT_PATH_ENV: "nonsense"})

    def test_reads_process_environment(self, monkeypatch):
        """Test that os.environ is used by default."""
        monkeypatch.setenv(DEFAULT_ORG_ENV, "fromenv")
        monkeypatch.delenv(PROJECT_PATH_ENV, raising=False)

        assert load_settings().default_org == "fromenv"

    def test_direct_construction(self):
        """Test building Settings without the environment."""
        settings = Settings(default_org=None, project_path_style="workspaces")

        assert settings.default_org == ""
        assert settings.project_path_style == ProjectPathStyle.WORKSPACES
