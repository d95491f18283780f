"""Forward-only cursor over HTML source text.

The cursor owns the source string, the current offset and the derived
line/column pair. End of input is represented by the empty string rather than
raised, so every lookahead is total.
"""

from dataclasses import dataclass
from typing import Callable, NoReturn, Optional

from strict_html_cst.shared.errors import (
    END_OF_INPUT,
    InternalError,
    ParseError,
    UnexpectedToken,
)

NEW_LINE = "\n"


@dataclass(frozen=True)
class SourcePosition:
    """Position of the cursor in the source."""

    line: int
    column: int
    offset: int

    def __post_init__(self) -> None:
        """Validate position values."""
        if self.line < 1:
            raise ValueError("Line number must be >= 1")
        if self.column < 1:
            raise ValueError("Column number must be >= 1")
        if self.offset < 0:
            raise ValueError("Offset must be >= 0")

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class Cursor:
    """Single-pass cursor with line/column tracking and a progress guard."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.length = len(source)
        self.index = 0
        self.line = 1
        self.column = 1

    @property
    def position(self) -> SourcePosition:
        return SourcePosition(self.line, self.column, self.index)

    @property
    def location(self) -> str:
        """Current position formatted as ``"line:column"``."""
        return f"{self.line}:{self.column}"

    @property
    def at_end(self) -> bool:
        return self.index >= self.length

    def peek(self, offset: int = 0) -> str:
        """Return the character at ``index + offset`` or ``""`` outside the source."""
        target = self.index + offset
        if 0 <= target < self.length:
            return self.source[target]
        return END_OF_INPUT

    def previous(self) -> str:
        return self.peek(-1)

    def lookahead(self, count: int) -> str:
        """Return up to ``count`` characters starting at the cursor."""
        return self.source[self.index:self.index + count]

    def advance(self, count: int = 1) -> None:
        """Move forward ``count`` characters, updating line and column."""
        for _ in range(count):
            if self.index >= self.length:
                return
            char = self.source[self.index]
            self.index += 1
            if char == NEW_LINE:
                self.line += 1
                self.column = 1
            else:
                self.column += 1

    def iterate(self, step: Callable[[], Optional[bool]]) -> None:
        """Run ``step`` until it returns true or the input is exhausted.

        Every iteration must move the cursor; a step that leaves the offset
        untouched would spin forever and is reported as an ``InternalError``.
        """
        while not self.at_end:
            last = self.index
            if step():
                return
            if self.index == last:
                self.fail(InternalError(f"Infinite loop at {self.location}"))

    def scan_until(self, stop: Callable[[], bool]) -> str:
        """Consume characters until ``stop()`` holds and return them."""
        start = self.index

        def step() -> bool:
            if stop():
                return True
            self.advance()
            return False

        self.iterate(step)
        return self.source[start:self.index]

    def expect(self, char: str) -> None:
        """Consume ``char`` or fail with ``UnexpectedToken``."""
        if self.peek() == char:
            self.advance()
            return
        self.unexpected(char)

    def unexpected(self, expected: Optional[str] = None) -> NoReturn:
        """Fail on the character under the cursor."""
        self.fail(UnexpectedToken(self.peek(), expected, self.location))

    def source_line(self, line: int) -> str:
        """Return the full text of the 1-based ``line``."""
        lines = self.source.split(NEW_LINE)
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return ""

    def fail(self, error: ParseError) -> NoReturn:
        """Locate ``error`` at the cursor and raise it."""
        raise error.locate(self.line, self.column, self.source_line(self.line))
