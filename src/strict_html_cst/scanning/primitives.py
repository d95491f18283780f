"""Tokenizing primitives built on the cursor.

Each ``scan_*`` method consumes one lexical construct and returns its raw
text. Nothing is decoded: entities, escaped quotes and whitespace are kept
exactly as written.
"""

from strict_html_cst.shared.errors import UnexpectedToken

from .cursor import NEW_LINE, Cursor

START_TAG = "<"
END_TAG = ">"
FORWARD_SLASH = "/"
BACK_SLASH = "\\"
SPACE = " "
EQUALS = "="
DOUBLE_QUOTE = '"'
COMMENT_END = "--"
COMMENT_TERMINATOR_LENGTH = 3  # -->

ATTRIBUTE_NAME_STOPS = frozenset({NEW_LINE, SPACE, EQUALS, FORWARD_SLASH})
TAG_NAME_STOPS = frozenset({FORWARD_SLASH, SPACE, NEW_LINE, END_TAG})
SPACES = SPACE + NEW_LINE


class Scanner(Cursor):
    """Cursor extended with the lexical scans of the strict HTML grammar."""

    def skip_spaces(self) -> None:
        self.scan_until(lambda: self.peek() not in (SPACE, NEW_LINE))

    def at_self_closing_marker(self) -> bool:
        return self.peek() == FORWARD_SLASH and self.peek(1) == END_TAG

    def at_end_of_attributes(self) -> bool:
        return self.peek() == END_TAG or self.at_self_closing_marker()

    def scan_tag_name(self) -> str:
        """Consume an opening tag name, up to ``/``, space, newline or ``>``."""
        return self.scan_until(lambda: self.peek() in TAG_NAME_STOPS)

    def scan_closing_tag_name(self) -> str:
        """Consume a closing tag name up to ``>``; trailing whitespace is dropped."""
        return self.scan_until(lambda: self.peek() == END_TAG).rstrip(SPACES)

    def scan_attribute_name(self, required: bool = True) -> str:
        """Consume an attribute name.

        Any character outside the stop set is accepted, so names such as
        ``[type]`` or ``(click)`` survive parsing untouched.

        Args:
            required: Fail on an empty name instead of returning ``""``
        """
        name = self.scan_until(lambda: self.peek() in ATTRIBUTE_NAME_STOPS)
        if not name and required:
            self.unexpected("attribute name")
        return name

    def scan_attribute_value(self) -> str:
        """Consume a double-quoted attribute value, quotes included.

        A quote preceded by a backslash does not terminate the value and the
        backslash is kept.
        """
        self.expect(DOUBLE_QUOTE)

        if self.peek() == DOUBLE_QUOTE:
            self.advance()
            return ""

        value = self.scan_until(
            lambda: self.peek() == DOUBLE_QUOTE and self.previous() != BACK_SLASH
        )
        self.expect(DOUBLE_QUOTE)

        if not value:
            self.fail(UnexpectedToken(self.peek(), "attribute value", self.location))
        return value

    def scan_comment(self) -> str:
        """Consume a comment body after ``<!--`` and skip its terminator."""
        text = self.scan_until(
            lambda: self.peek() == "-" and self.peek(1) == "-"
        )
        if self.at_end:
            self.unexpected("-->")
        self.advance(COMMENT_TERMINATOR_LENGTH)
        return text.strip()

    def scan_doctype(self) -> str:
        """Consume a doctype body after ``<!doctype`` and its closing ``>``."""
        doc_type = self.scan_until(lambda: self.peek() == END_TAG)
        self.expect(END_TAG)
        return doc_type

    def scan_text(self) -> str:
        """Consume a text run up to the next ``<``."""
        return self.scan_until(lambda: self.peek() == START_TAG)
