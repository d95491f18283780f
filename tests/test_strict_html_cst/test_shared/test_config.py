"""Tests for the parser configuration object."""

import dataclasses
import json

import pytest

from strict_html_cst.shared.config import (
    DEFAULT_DOC_TYPE,
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)


class TestParserConfigDefaults:
    """Test default configuration values."""

    def test_default_configuration(self):
        """Test default parser configuration values."""
        config = ParserConfig()

        assert config.default_doc_type == DEFAULT_DOC_TYPE == "html"
        assert config.normalize_whitespace is False
        assert config.input_encoding is None
        assert config.correlation_id is None
        assert config.name is None

    def test_configuration_is_frozen(self):
        """Test that configuration instances are immutable."""
        config = ParserConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.normalize_whitespace = True  # type: ignore[misc]


class TestParserConfigValidation:
    """Test configuration validation failures."""

    def test_unknown_input_encoding_rejected(self):
        """Test that an unknown codec name raises ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="Unknown input_encoding") as exc_info:
            ParserConfig(input_encoding="no-such-codec")

        assert exc_info.value.field_name == "input_encoding"
        assert "utf-8" in exc_info.value.suggestions

    def test_known_input_encoding_accepted(self):
        """Test that a real codec name validates."""
        assert ParserConfig(input_encoding="latin-1").input_encoding == "latin-1"

    def test_non_string_doc_type_rejected(self):
        """Test that default_doc_type must be a string."""
        with pytest.raises(ConfigValidationError, match="default_doc_type must be a string"):
            ParserConfig(default_doc_type=5)  # type: ignore[arg-type]

    def test_non_bool_normalize_rejected(self):
        """Test that normalize_whitespace must be a boolean."""
        with pytest.raises(ConfigValidationError, match="normalize_whitespace"):
            ParserConfig(normalize_whitespace="yes")  # type: ignore[arg-type]

    def test_validation_error_is_config_error(self):
        """Test the configuration exception hierarchy."""
        assert issubclass(ConfigValidationError, ConfigError)
        error = ConfigValidationError("bad")
        assert error.field_name is None
        assert error.suggestions == []


class TestParserConfigOverride:
    """Test deriving modified configurations."""

    def test_override_returns_new_instance(self):
        """Test override leaves the original untouched."""
        config = ParserConfig()
        new_config = config.override(normalize_whitespace=True, default_doc_type="xhtml")

        assert new_config is not config
        assert new_config.normalize_whitespace is True
        assert new_config.default_doc_type == "xhtml"
        assert config.normalize_whitespace is False

    def test_override_unknown_field_rejected(self):
        """Test override with an unknown field name."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration fields: colour"):
            ParserConfig().override(colour="blue")

    def test_override_revalidates(self):
        """Test that overrides go through validation."""
        with pytest.raises(ConfigValidationError):
            ParserConfig().override(input_encoding="bogus-encoding")


class TestParserConfigSerialization:
    """Test dict and JSON round trips."""

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = ParserConfig(correlation_id="abc").to_dict()

        assert data == {
            "default_doc_type": "html",
            "normalize_whitespace": False,
            "input_encoding": None,
            "correlation_id": "abc",
            "name": None,
            "description": None,
        }

    def test_from_dict_round_trip(self):
        """Test that from_dict restores an equal configuration."""
        config = ParserConfig(normalize_whitespace=True, input_encoding="utf-16")

        assert ParserConfig.from_dict(config.to_dict()) == config

    def test_from_dict_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ConfigValidationError):
            ParserConfig.from_dict({"max_depth": 3})

    def test_json_round_trip(self):
        """Test JSON serialization and deserialization."""
        config = ParserConfig.whitespace_insensitive()
        json_str = config.to_json()

        assert json.loads(json_str)["normalize_whitespace"] is True
        assert ParserConfig.from_json(json_str) == config

    def test_from_json_invalid(self):
        """Test invalid JSON input."""
        with pytest.raises(ConfigValidationError, match="Invalid configuration JSON"):
            ParserConfig.from_json("{not json")

    def test_from_json_requires_object(self):
        """Test JSON that is not an object."""
        with pytest.raises(ConfigValidationError, match="must be an object"):
            ParserConfig.from_json("[1, 2]")


class TestParserConfigPresets:
    """Test preset factory methods."""

    def test_strict_preset(self):
        """Test the strict preset keeps every text node."""
        config = ParserConfig.strict()

        assert config.name == "strict"
        assert config.normalize_whitespace is False

    def test_whitespace_insensitive_preset(self):
        """Test the whitespace insensitive preset enables normalization."""
        config = ParserConfig.whitespace_insensitive()

        assert config.name == "whitespace_insensitive"
        assert config.normalize_whitespace is True
