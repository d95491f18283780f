"""Strict HTML CST Parser.

A strict, hand-written recursive-descent parser that converts HTML source into
a concrete syntax tree. Malformed input is a hard failure carrying the line,
column and a caret-marked copy of the offending source line.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_string(), parse_file()
- Level 2: Configured parser - StrictHTMLParser class
- Tree tools: normalize(), serialize(), materialize()
"""

__version__ = "0.1.0"
__author__ = "Strict HTML CST Team"

from .api import (
    DocumentFragment,
    HostElement,
    StrictHTMLParser,
    materialize,
    parse,
    parse_file,
    parse_string,
)
from .shared import (
    ConfigError,
    ConfigValidationError,
    HTMLSyntaxError,
    InternalError,
    ParseError,
    ParserConfig,
    TagMismatch,
    UnclosedTags,
    UnexpectedToken,
)
from .tree import (
    Attribute,
    Comment,
    Document,
    Element,
    NodeType,
    Parser,
    Text,
    normalize,
    serialize,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_string",
    "parse_file",

    # Level 2: Configured parser and the low-level driver
    "StrictHTMLParser",
    "Parser",

    # Tree nodes
    "Attribute",
    "Comment",
    "Document",
    "Element",
    "NodeType",
    "Text",

    # Tree tools
    "normalize",
    "serialize",
    "materialize",
    "DocumentFragment",
    "HostElement",

    # Configuration
    "ParserConfig",
    "ConfigError",
    "ConfigValidationError",

    # Errors
    "ParseError",
    "HTMLSyntaxError",
    "UnexpectedToken",
    "TagMismatch",
    "UnclosedTags",
    "InternalError",
]
