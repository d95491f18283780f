"""Parser driver that builds the concrete syntax tree.

The driver walks the source once. At every position it decides whether a
closing tag, an opening tag, a comment, a doctype or a text run starts there,
consumes it through the scanner and updates an explicit stack of open nodes.
The document root sits at the bottom of the stack for the whole parse; any
element still above it when input runs out is reported as unclosed.
"""

import time
from typing import List, Optional

from strict_html_cst.scanning import Scanner, SourcePosition
from strict_html_cst.scanning.primitives import END_TAG, FORWARD_SLASH, START_TAG
from strict_html_cst.shared import (
    ParseError,
    ParserConfig,
    TagMismatch,
    UnclosedTags,
    UnexpectedToken,
    get_logger,
)

from .nodes import Attribute, Comment, Document, Element, ParentNode, Text
from .normalize import normalize

COMMENT_START = "!--"
DOCTYPE = "!doctype"
VOID_ELEMENTS = frozenset({"meta", "link", "br", "hr"})


class Parser:
    """Strict single-use HTML parser for one source string.

    Examples:
        >>> document = Parser('<p class="lead">Hi<br></p>').parse()
        >>> document.children[0].children[1].self_close
        True
    """

    def __init__(
        self,
        html: str,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the parser.

        Args:
            html: Complete HTML source
            config: Parser configuration (defaults to ``ParserConfig()``)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "html_parser")

        self.scanner = Scanner(html)
        self.root = Document(doc_type=self.config.default_doc_type)
        self.stack: List[ParentNode] = [self.root]
        self._finished = False
        self._error: Optional[ParseError] = None

    @property
    def position(self) -> SourcePosition:
        return self.scanner.position

    @property
    def location(self) -> str:
        """Current position as ``"line:column"``."""
        return self.scanner.location

    @property
    def current(self) -> ParentNode:
        return self.stack[-1]

    def parse(self) -> Document:
        """Parse the whole source and return the document.

        A parser runs once. Later calls return the same document or, after a
        failure, raise the same error again.

        Raises:
            UnexpectedToken: A character violates the grammar
            TagMismatch: A closing tag does not match the open element
            UnclosedTags: Input ended with elements still open
            InternalError: The scanner stopped making progress
        """
        if self._error is not None:
            raise self._error
        if self._finished:
            return self.root

        start_time = time.time()
        self.logger.debug(
            "Starting parse",
            extra={"char_count": self.scanner.length}
        )

        try:
            self.scanner.iterate(self._parse_next)

            open_elements = self.stack[1:]
            if open_elements:
                self.scanner.fail(UnclosedTags([node.tag for node in open_elements]))
            self.stack.pop()
        except ParseError as e:
            self._error = e
            self.logger.warning(
                "Parse failed",
                extra={
                    "error_type": type(e).__name__,
                    "location": e.location,
                    "error": e.message,
                }
            )
            raise

        if self.config.normalize_whitespace:
            normalize(self.root)

        self._finished = True
        self.logger.debug(
            "Parse completed",
            extra={
                "element_count": sum(1 for _ in self.root.iter_elements()),
                "processing_time_ms": (time.time() - start_time) * 1000,
            }
        )
        return self.root

    def _parse_next(self) -> bool:
        """Consume the construct at the cursor; return True once input is exhausted."""
        scanner = self.scanner

        if scanner.lookahead(2) == START_TAG + FORWARD_SLASH:
            self._parse_closing_tag()
        elif scanner.peek() == START_TAG:
            self._parse_tag()
        elif not self._parse_text() and not scanner.at_end:
            scanner.fail(UnexpectedToken(scanner.peek(), position=scanner.location))

        return scanner.at_end

    def _parse_closing_tag(self) -> None:
        scanner = self.scanner
        scanner.advance(2)  # </
        tag_to_close = scanner.scan_closing_tag_name()

        current = self.current
        if not isinstance(current, Element):
            scanner.fail(TagMismatch(None, tag_to_close))
        if current.tag != tag_to_close:
            scanner.fail(TagMismatch(current.tag, tag_to_close))

        scanner.expect(END_TAG)
        self._close_tag()

    def _parse_tag(self) -> None:
        # <div>, <input/>, <input type="text"/>, <br>, <!-- comment -->, <!doctype html>
        scanner = self.scanner
        scanner.advance()  # <
        tag_name = scanner.scan_tag_name()

        if tag_name == COMMENT_START:
            self.current.children.append(Comment(scanner.scan_comment()))
            return

        if tag_name == DOCTYPE:
            if self.current is not self.root:
                scanner.fail(
                    UnexpectedToken(tag_name, "doctype at document level", scanner.location)
                )
            self.root.doc_type = scanner.scan_doctype()
            return

        if not tag_name:
            scanner.unexpected("tag name")

        self._open_tag(tag_name)

        if scanner.at_self_closing_marker():
            self._close_tag(self_close=True)
            scanner.advance(2)
            return

        if scanner.peek() != END_TAG:
            self._parse_attributes()

        if scanner.at_self_closing_marker():
            self._close_tag(self_close=True)
            scanner.advance(2)
            return

        if scanner.peek() == END_TAG:
            if tag_name in VOID_ELEMENTS:
                self._close_tag(self_close=True)
            scanner.advance()
            return

        scanner.unexpected("end of tag creation")

    def _parse_attributes(self) -> None:
        scanner = self.scanner
        element = self.current

        while True:
            scanner.skip_spaces()
            if scanner.at_end_of_attributes():
                break

            name = scanner.scan_attribute_name(required=False)
            if not name:
                break

            value = ""
            if scanner.peek() == "=":
                scanner.advance()
                value = scanner.scan_attribute_value()

            element.attributes.append(Attribute(name, value))

    def _parse_text(self) -> bool:
        if self.scanner.peek() == START_TAG:
            return False

        text = self.scanner.scan_text()
        if text:
            self.current.children.append(Text(text))
            return True
        return False

    def _open_tag(self, tag_name: str) -> None:
        element = Element(tag=tag_name)
        self.current.children.append(element)
        self.stack.append(element)

    def _close_tag(self, self_close: bool = False) -> None:
        element = self.stack.pop()
        element.self_close = self_close


def parse(
    html: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> Document:
    """Parse ``html`` into a :class:`Document` with a fresh :class:`Parser`."""
    return Parser(html, config, correlation_id).parse()
