"""Shared utilities for strict HTML parsing.

This module provides the configuration object, the parse failure taxonomy and
correlation-aware logging used across all processing layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)
from .errors import (
    HTMLSyntaxError,
    InternalError,
    ParseError,
    TagMismatch,
    UnclosedTags,
    UnexpectedToken,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ParserConfig",
    "HTMLSyntaxError",
    "InternalError",
    "ParseError",
    "TagMismatch",
    "UnclosedTags",
    "UnexpectedToken",
    "CorrelationLogger",
    "get_logger",
]
