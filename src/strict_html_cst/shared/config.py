"""Configuration classes for strict HTML parsing.

This module provides the immutable configuration object shared by the parser
driver and the API layer.
"""

import codecs
import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional

DEFAULT_DOC_TYPE = "html"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the strict HTML parser.

    Thread-safe due to frozen dataclass implementation; use :meth:`override`
    to derive a modified copy.

    Attributes:
        default_doc_type: ``Document.doc_type`` when the source has no doctype
        normalize_whitespace: Prune whitespace-only text nodes after parsing
        input_encoding: Codec for bytes input that carries no BOM (UTF-8 if None)
        correlation_id: Correlation ID attached to every log record
    """

    default_doc_type: str = DEFAULT_DOC_TYPE
    normalize_whitespace: bool = False
    input_encoding: Optional[str] = None
    correlation_id: Optional[str] = None

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if not isinstance(self.default_doc_type, str):
            raise ConfigValidationError(
                "default_doc_type must be a string",
                field_name="default_doc_type",
            )
        if not isinstance(self.normalize_whitespace, bool):
            raise ConfigValidationError(
                "normalize_whitespace must be a boolean",
                field_name="normalize_whitespace",
            )
        if self.input_encoding is not None:
            try:
                codecs.lookup(self.input_encoding)
            except LookupError as e:
                raise ConfigValidationError(
                    f"Unknown input_encoding: {self.input_encoding}",
                    field_name="input_encoding",
                    suggestions=["utf-8", "utf-16", "latin-1"],
                ) from e

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ParserConfig().override(normalize_whitespace=True)
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected rather than silently dropped.
        """
        return cls().override(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def strict(cls) -> "ParserConfig":
        """Default preset: the tree mirrors the source exactly."""
        return cls(
            name="strict",
            description="Concrete syntax tree with every text run preserved",
        )

    @classmethod
    def whitespace_insensitive(cls) -> "ParserConfig":
        """Preset that drops whitespace-only text nodes after parsing."""
        return cls(
            normalize_whitespace=True,
            name="whitespace_insensitive",
            description="Concrete syntax tree without whitespace-only text nodes",
        )
