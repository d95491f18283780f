"""Parse failure taxonomy for strict HTML parsing.

Every failure is a hard stop: the parser raises one of the errors below and no
partial tree is produced. Before an error leaves the parser it is *located*:
the line, column, offending source line and a caret marker are attached so the
failure can be pinpointed without reopening the source.
"""

from typing import Any, Dict, List, Optional, Sequence

END_OF_INPUT = ""


def describe_char(char: str) -> str:
    """Render a scanned character for use in diagnostics."""
    if char == END_OF_INPUT:
        return "end of input"
    return f'"{char}"'


class ParseError(Exception):
    """Base class for every failure raised while parsing."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.line: Optional[int] = None
        self.column: Optional[int] = None
        self.source_line: Optional[str] = None
        self.origin: Optional[str] = None

    @property
    def location(self) -> Optional[str]:
        """Position of the failure as ``"line:column"``."""
        if self.line is None or self.column is None:
            return None
        return f"{self.line}:{self.column}"

    def locate(self, line: int, column: int, source_line: str) -> "ParseError":
        """Attach position details and the caret-marked source line.

        Returns the error itself so callers can ``raise error.locate(...)``.
        """
        self.line = line
        self.column = column
        self.source_line = source_line
        self.origin = source_line + "\n" + " " * max(column - 2, 0) + "^"
        return self

    def format_diagnostic(self) -> str:
        """Render message, location and caret-marked source as one block."""
        if self.origin is None:
            return self.message
        return f"{self.message}\n  at {self.location}\n{self.origin}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a plain diagnostic dictionary."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "location": self.location,
            "source_line": self.source_line,
            "origin": self.origin,
        }


class HTMLSyntaxError(ParseError):
    """The input is not well-formed according to the strict grammar."""


class UnexpectedToken(HTMLSyntaxError):
    """A scan met a character that violates the grammar.

    Attributes:
        found: The offending character, ``""`` at end of input
        expected: Description of what the grammar required, if any
    """

    def __init__(
        self,
        found: str,
        expected: Optional[str] = None,
        position: Optional[str] = None
    ) -> None:
        message = f"Unexpected {describe_char(found)}"
        if expected is not None:
            message += f". Expected {expected}"
        if position is not None:
            message += f" at {position}"
        super().__init__(message)
        self.found = found
        self.expected = expected


class TagMismatch(HTMLSyntaxError):
    """A closing tag does not match the innermost open element."""

    def __init__(self, expected_tag: Optional[str], found_tag: str) -> None:
        if expected_tag is None:
            message = f'Unexpected closing tag "{found_tag}", no element is open'
        else:
            message = f'Expected closing "{expected_tag}", found "{found_tag}"'
        super().__init__(message)
        self.expected_tag = expected_tag
        self.found_tag = found_tag


class UnclosedTags(HTMLSyntaxError):
    """Input ended while elements were still open."""

    def __init__(self, tag_names: Sequence[str]) -> None:
        self.tag_names: List[str] = list(tag_names)
        self.depth = len(self.tag_names)
        super().__init__(f"Some tags are not closed: {', '.join(self.tag_names)}")


class InternalError(ParseError):
    """A scanning loop failed to make progress.

    This signals a defect in the scanner rather than a problem with the input.
    """
