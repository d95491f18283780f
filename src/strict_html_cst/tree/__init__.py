"""Tree layer for the strict HTML parser.

Key Components:
    Parser: Parser driver building a Document from source text
    Document, Element, Attribute, Comment, Text: Concrete syntax tree nodes
    normalize: In-place removal of whitespace-only text nodes
    serialize: Conversion of a tree back to HTML text
"""

from .builder import VOID_ELEMENTS, Parser, parse
from .nodes import (
    Attribute,
    ChildNode,
    Comment,
    Document,
    Element,
    Node,
    NodeType,
    ParentNode,
    Text,
)
from .normalize import normalize
from .serialize import serialize, serialize_attributes

__all__ = [
    "VOID_ELEMENTS",
    "Attribute",
    "ChildNode",
    "Comment",
    "Document",
    "Element",
    "Node",
    "NodeType",
    "ParentNode",
    "Parser",
    "Text",
    "normalize",
    "parse",
    "serialize",
    "serialize_attributes",
]
