"""Public API for strict HTML parsing.

Level 1 functions (``parse``, ``parse_string``, ``parse_file``), the
configurable ``StrictHTMLParser`` class and materialization into ElementTree.
"""

from .materialize import (
    VALID_ATTRIBUTE,
    DocumentFragment,
    HostElement,
    Visitor,
    materialize,
)
from .parser import StrictHTMLParser, parse, parse_file, parse_string

__all__ = [
    "VALID_ATTRIBUTE",
    "DocumentFragment",
    "HostElement",
    "StrictHTMLParser",
    "Visitor",
    "materialize",
    "parse",
    "parse_file",
    "parse_string",
]
