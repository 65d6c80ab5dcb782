"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from services.spanish_id.settings import SpanishIdSettings


class TestSettings:
    """Test settings defaults and validation."""

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT", "STRICT_CLASSIFICATION", "OUTPUT_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        config = SpanishIdSettings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.strict_classification is False
        assert config.output_format == "json"
        assert config.is_production() is False

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("STRICT_CLASSIFICATION", "true")
        monkeypatch.setenv("OUTPUT_FORMAT", "TEXT")
        monkeypatch.setenv("ENVIRONMENT", "Production")

        config = SpanishIdSettings(_env_file=None)

        assert config.log_level == "DEBUG"
        assert config.strict_classification is True
        assert config.output_format == "text"
        assert config.is_production() is True

    @pytest.mark.parametrize(
        "field,value",
        [
            ("log_level", "VERBOSE"),
            ("log_format", "xml"),
            ("output_format", "csv"),
            ("environment", "qa"),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            SpanishIdSettings(_env_file=None, **{field: value})
