"""Concrete syntax tree node types.

Nodes keep source-level detail: raw text, trimmed comment text, attribute
order and duplicate attributes. Equality is structural, so two trees compare
equal when their whole subtrees match.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

from strict_html_cst.shared.config import DEFAULT_DOC_TYPE


class NodeType(Enum):
    """Kinds of CST node."""

    DOCUMENT = "document"
    ELEMENT = "element"
    COMMENT = "comment"
    TEXT = "text"


@dataclass
class Attribute:
    """A single ``name="value"`` pair; ``value`` is ``""`` when omitted."""

    name: str
    value: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass
class Text:
    """Raw character run between tags."""

    text: str

    @property
    def type(self) -> NodeType:
        return NodeType.TEXT

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "text": self.text}


@dataclass
class Comment:
    """Comment with surrounding whitespace trimmed."""

    text: str

    @property
    def type(self) -> NodeType:
        return NodeType.COMMENT

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "text": self.text}


@dataclass
class Element:
    """An element with its attributes and children in source order.

    Attributes:
        tag: Tag name as written, never empty
        self_close: True for ``<tag/>`` and auto-closed void elements
        attributes: Attributes in source order, duplicates kept
        children: Child nodes in document order
    """

    tag: str
    self_close: bool = False
    attributes: List[Attribute] = field(default_factory=list)
    children: List["ChildNode"] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate element values."""
        if not self.tag:
            raise ValueError("Element tag cannot be empty")

    @property
    def type(self) -> NodeType:
        return NodeType.ELEMENT

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the value of the first attribute called ``name``."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.value
        return default

    def has_attribute(self, name: str) -> bool:
        return any(attribute.name == name for attribute in self.attributes)

    def iter_elements(self) -> Iterator["Element"]:
        """Iterate over descendant elements in document order."""
        return _iter_elements(self.children)

    def find_all(self, tag: str) -> List["Element"]:
        """Find all descendant elements with matching tag name."""
        return [element for element in self.iter_elements() if element.tag == tag]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "tag": self.tag,
            "selfClose": self.self_close,
            "attributes": [attribute.to_dict() for attribute in self.attributes],
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class Document:
    """Root container produced by every successful parse."""

    doc_type: str = DEFAULT_DOC_TYPE
    children: List["ChildNode"] = field(default_factory=list)

    @property
    def type(self) -> NodeType:
        return NodeType.DOCUMENT

    def iter_elements(self) -> Iterator[Element]:
        """Iterate over all elements in document order."""
        return _iter_elements(self.children)

    def find_all(self, tag: str) -> List[Element]:
        """Find all elements with matching tag name."""
        return [element for element in self.iter_elements() if element.tag == tag]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "docType": self.doc_type,
            "children": [child.to_dict() for child in self.children],
        }


ChildNode = Union[Element, Comment, Text]
ParentNode = Union[Document, Element]
Node = Union[Document, Element, Comment, Text]


def _iter_elements(children: List[ChildNode]) -> Iterator[Element]:
    for child in children:
        if isinstance(child, Element):
            yield child
            yield from child.iter_elements()
