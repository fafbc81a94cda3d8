"""Tests for settings loading."""

import json

import pytest

from erd_cli.config import Settings, load_settings
from erd_cli.errors import ConfigurationError


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for var in ("PG_HOSTNAME", "PG_SCHEMA", "INCLUDE_TABLES", "DIRECTION"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.pg_hostname == "localhost"
        assert settings.pg_schema == "public"
        assert settings.include_tables is None
        assert settings.title_loc == "t"
        assert settings.title_size == 30
        assert settings.direction == "TB"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PG_HOSTNAME", "db.internal")
        monkeypatch.setenv("EXCLUDE_TABLES", '["schema_migrations"]')

        settings = Settings(_env_file=None)

        assert settings.pg_hostname == "db.internal"
        assert settings.exclude_tables == ["schema_migrations"]


class TestLoadSettings:
    """Test JSON options templates."""

    def test_without_template(self):
        assert isinstance(load_settings(), Settings)

    def test_template_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PG_DATABASE", "from_env")
        template = tmp_path / "erd.json"
        template.write_text(json.dumps({
            "pg_database": "shop",
            "include_tables": ["users", "orders"],
            "column_description_wrap": 40,
        }))

        settings = load_settings(template)

        assert settings.pg_database == "shop"
        assert settings.include_tables == ["users", "orders"]
        assert settings.column_description_wrap == 40

    def test_missing_template(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(tmp_path / "missing.json")

        assert exc_info.value.code == "CONFIGURATION_ERROR"

    def test_invalid_json(self, tmp_path):
        template = tmp_path / "erd.json"
        template.write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_settings(template)

    def test_template_must_be_object(self, tmp_path):
        template = tmp_path / "erd.json"
        template.write_text('["users"]')

        with pytest.raises(ConfigurationError):
            load_settings(template)

    def test_invalid_value(self, tmp_path):
        template = tmp_path / "erd.json"
        template.write_text('{"title_size": "huge"}')

        with pytest.raises(ConfigurationError):
            load_settings(template)

    def test_negative_wrap_width(self, tmp_path):
        template = tmp_path / "erd.json"
        template.write_text(json.dumps({"column_description_wrap": -1}))

        with pytest.raises(ConfigurationError):
            load_settings(template)

    def test_zero_wrap_width_allowed(self, tmp_path):
        template = tmp_path / "erd.json"
        template.write_text(json.dumps({"table_description_wrap": 0}))

        assert load_settings(template).table_description_wrap == 0
