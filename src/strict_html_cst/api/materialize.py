"""Materialization of parsed trees into ``xml.etree.ElementTree`` constructs.

Elements become :class:`HostElement` instances, comments become
``ElementTree.Comment`` elements and text becomes plain strings folded into
``.text``/``.tail`` the way ElementTree stores character data. Only attribute
names matching ``^[a-z][a-z0-9-]+$`` are applied as live attributes; the
complete raw attribute list always travels along as ``raw_attributes``.
"""

import re
import xml.etree.ElementTree as ET
from typing import Any, Callable, List, Optional, Union

from strict_html_cst.tree import Attribute, Comment, Document, Element, Node, Text

VALID_ATTRIBUTE = re.compile(r"^[a-z][a-z0-9-]+$")

Construct = Union["DocumentFragment", ET.Element, str]
Visitor = Callable[[Any, Node], Optional[Any]]


class HostElement(ET.Element):
    """ElementTree element that also keeps the element's raw attributes."""

    raw_attributes: List[Attribute]


class DocumentFragment(list):
    """Ordered top-level constructs of a materialized document."""

    def __init__(self, doc_type: str) -> None:
        super().__init__()
        self.doc_type = doc_type


def is_valid_attribute_name(name: str) -> bool:
    return VALID_ATTRIBUTE.match(name) is not None


def append_construct(parent: Union[DocumentFragment, ET.Element], construct: Any) -> None:
    """Append a materialized construct, merging strings into text/tail."""
    if isinstance(parent, DocumentFragment):
        parent.append(construct)
        return

    if isinstance(construct, str):
        if len(parent):
            last = parent[-1]
            last.tail = (last.tail or "") + construct
        else:
            parent.text = (parent.text or "") + construct
        return

    parent.append(construct)


def materialize(node: Node, visitor: Optional[Visitor] = None) -> Any:
    """Convert a parsed node and its subtree into ElementTree constructs.

    Args:
        node: Document, Element, Comment or Text to convert
        visitor: Optional ``visitor(construct, node)`` called after each
            construct is built, children first; a non-None return value
            replaces the construct

    Returns:
        DocumentFragment for a Document, HostElement for an Element, a comment
        element for a Comment and ``str`` for Text (or the visitor's replacement)

    Examples:
        >>> from strict_html_cst import parse
        >>> element = materialize(parse('<a href="/x" [y]="z">go</a>').children[0])
        >>> element.attrib, [a.name for a in element.raw_attributes]
        ({'href': '/x'}, ['href', '[y]'])
    """
    construct: Any

    if isinstance(node, Document):
        construct = DocumentFragment(node.doc_type)
        for child in node.children:
            append_construct(construct, materialize(child, visitor))

    elif isinstance(node, Text):
        construct = node.text

    elif isinstance(node, Comment):
        construct = ET.Comment(node.text)

    elif isinstance(node, Element):
        construct = HostElement(node.tag)
        for child in node.children:
            append_construct(construct, materialize(child, visitor))

        construct.raw_attributes = list(node.attributes)
        for attribute in node.attributes:
            if is_valid_attribute_name(attribute.name):
                construct.set(attribute.name, attribute.value)

    else:
        raise TypeError(f"Invalid node type: {type(node).__name__}")

    if visitor is not None:
        replacement = visitor(construct, node)
        if replacement is not None:
            return replacement
    return construct
