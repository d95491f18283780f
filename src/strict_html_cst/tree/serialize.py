"""Serialization of parsed trees back to HTML text.

Self-closing elements always carry a space before the slash (``<br />``,
``<input type="text" />``); this formatting is kept stable because existing
serialized output may be compared verbatim.

Output re-parses to an equal tree with two exceptions:

- the doctype is not written, so a re-parsed document gets the configured
  default ``doc_type``;
- an empty-valued attribute is written as a bare name, and a bare name
  directly before ``>`` (``<p hidden>``) does not parse. On self-closed
  elements the ``" />"`` suffix keeps it parseable.
"""

from typing import List

from .nodes import Attribute, Comment, Document, Element, Node, Text


def serialize_attributes(attributes: List[Attribute]) -> str:
    """Render attributes as ``name="value"`` or bare ``name``, space-prefixed."""
    if not attributes:
        return ""
    rendered = [
        f'{attribute.name}="{attribute.value}"' if attribute.value else attribute.name
        for attribute in attributes
    ]
    return " " + " ".join(rendered)


def serialize(node: Node) -> str:
    """Convert a node and its subtree to HTML text."""
    if isinstance(node, Document):
        return "".join(serialize(child) for child in node.children)

    if isinstance(node, Text):
        return node.text

    if isinstance(node, Comment):
        return f"<!-- {node.text} -->"

    if isinstance(node, Element):
        attributes = serialize_attributes(node.attributes)
        if node.self_close:
            return f"<{node.tag}{attributes} />"
        children = "".join(serialize(child) for child in node.children)
        return f"<{node.tag}{attributes}>{children}</{node.tag}>"

    raise TypeError(f"Invalid node type: {type(node).__name__}")
