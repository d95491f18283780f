"""Core parser API with progressive disclosure for strict HTML parsing.

This module provides the main parsing API, from simple module-level functions
to a configurable parser class. Parse failures are never swallowed: they are
logged and re-raised to the caller.
"""

import time
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, TextIO, Union

from strict_html_cst.character import decode_source
from strict_html_cst.shared import ParseError, ParserConfig, get_logger
from strict_html_cst.tree import Document, Parser

# Type definitions for input data
InputType = Union[str, bytes, BinaryIO, TextIO, Path]

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000


def parse(
    input_data: InputType,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> Document:
    """Parse HTML from various input sources with automatic type detection.

    Args:
        input_data: HTML content as string, bytes, file-like object, or Path
        config: Optional parser configuration
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The parsed Document

    Raises:
        ParseError: The input is not well-formed

    Examples:
        >>> document = parse('<ul><li>one</li></ul>')
        >>> document.children[0].tag
        'ul'

        >>> parse(b'\\xef\\xbb\\xbf<br>').children[0].self_close
        True
    """
    logger = get_logger(__name__, correlation_id, "parse")
    logger.debug(
        "Starting universal parse operation",
        extra={"input_type": type(input_data).__name__}
    )

    if isinstance(input_data, Path):
        return parse_file(input_data, config=config, correlation_id=correlation_id)
    if isinstance(input_data, (str, bytes)):
        return _parse_direct_content(input_data, config, correlation_id)
    if hasattr(input_data, "read"):
        return _parse_direct_content(input_data.read(), config, correlation_id)

    raise TypeError(
        f"Unsupported input type {type(input_data).__name__}; "
        "expected str, bytes, Path or a file-like object"
    )


def parse_string(
    html: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> Document:
    """Parse HTML from a string.

    Examples:
        >>> parse_string('<!-- note -->').children[0].text
        'note'
    """
    if not isinstance(html, str):
        raise TypeError(f"parse_string expects str, got {type(html).__name__}")
    return _parse_direct_content(html, config, correlation_id)


def parse_file(
    file_path: Union[str, Path],
    encoding: Optional[str] = None,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> Document:
    """Parse HTML from a file.

    The file is read as bytes and decoded like any other bytes input; an
    explicit ``encoding`` takes the place of ``config.input_encoding``.

    Args:
        file_path: Path to the HTML file (string or Path object)
        encoding: Optional encoding for files without a byte order mark
        config: Optional parser configuration
        correlation_id: Optional correlation ID for request tracking

    Raises:
        OSError: The file cannot be read
        ParseError: The file content is not well-formed
    """
    logger = get_logger(__name__, correlation_id, "parse_file")
    path = Path(file_path)

    config = config or ParserConfig()
    if encoding is not None:
        config = config.override(input_encoding=encoding)

    logger.info("Reading HTML file", extra={"file_path": str(path)})
    content = path.read_bytes()

    return _parse_direct_content(content, config, correlation_id)


def _parse_direct_content(
    content: Union[str, bytes],
    config: Optional[ParserConfig],
    correlation_id: Optional[str]
) -> Document:
    """Decode ``content`` if needed and run a fresh parser over it."""
    config = config or ParserConfig()
    correlation_id = correlation_id or config.correlation_id
    logger = get_logger(__name__, correlation_id, "parse_direct")

    if isinstance(content, bytes):
        content = decode_source(content, config.input_encoding)

    logger.debug(
        "Parsing content",
        extra={
            "content_length": len(content),
            "preview": (
                content[:PREVIEW_LENGTH] + "..."
                if len(content) > PREVIEW_LENGTH else content
            )
        }
    )
    return Parser(content, config, correlation_id).parse()


class StrictHTMLParser:
    """Configured HTML parser with reuse and usage statistics.

    Every call to :meth:`parse` runs a fresh :class:`Parser`, so one instance
    can serve many documents.

    Examples:
        >>> parser = StrictHTMLParser(ParserConfig.whitespace_insensitive())
        >>> document = parser.parse('<ul>\\n  <li>one</li>\\n</ul>')
        >>> [child.tag for child in document.children[0].children]
        ['li']
        >>> parser.statistics["successful_parses"]
        1
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the parser.

        Args:
            config: Parser configuration (defaults to ``ParserConfig.strict()``)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ParserConfig.strict()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "strict_html_parser")

        self._parse_count = 0
        self._successful_parses = 0
        self._failed_parses = 0
        self._total_processing_time = 0.0

    def parse(
        self,
        input_data: InputType,
        config_override: Optional[ParserConfig] = None
    ) -> Document:
        """Parse HTML with this parser's configuration.

        Args:
            input_data: HTML content as any supported input type
            config_override: Optional configuration for this call only

        Raises:
            ParseError: The input is not well-formed
        """
        start_time = time.time()
        config = config_override or self.config

        try:
            document = parse(input_data, config=config, correlation_id=self.correlation_id)
        except ParseError as e:
            self._record(start_time, success=False)
            self.logger.warning(
                "Configured parse failed",
                extra={"error_type": type(e).__name__, "location": e.location}
            )
            raise

        self._record(start_time, success=True)
        self.logger.info(
            "Configured parse completed",
            extra={
                "total_parses": self._parse_count,
                "success_rate": self._successful_parses / self._parse_count,
            }
        )
        return document

    def _record(self, start_time: float, success: bool) -> None:
        self._parse_count += 1
        self._total_processing_time += (time.time() - start_time) * MS_PER_SECOND
        if success:
            self._successful_parses += 1
        else:
            self._failed_parses += 1

    def reconfigure(self, config: ParserConfig) -> None:
        """Replace the configuration used by subsequent parses."""
        self.config = config
        self.logger.info("Parser reconfigured", extra={"config_name": config.name})

    @property
    def statistics(self) -> Dict[str, Any]:
        """Get parser usage statistics."""
        return {
            "total_parses": self._parse_count,
            "successful_parses": self._successful_parses,
            "failed_parses": self._failed_parses,
            "success_rate": (
                self._successful_parses / self._parse_count
                if self._parse_count > 0 else 0.0
            ),
            "total_processing_time_ms": self._total_processing_time,
            "average_processing_time_ms": (
                self._total_processing_time / self._parse_count
                if self._parse_count > 0 else 0.0
            ),
            "correlation_id": self.correlation_id,
        }

    def reset_statistics(self) -> None:
        """Reset parser usage statistics."""
        self._parse_count = 0
        self._successful_parses = 0
        self._failed_parses = 0
        self._total_processing_time = 0.0
        self.logger.info("Parser statistics reset")
