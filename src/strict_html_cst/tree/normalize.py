"""Whitespace normalization for parsed trees."""

from .nodes import Document, Element, Node, Text


def normalize(node: Node) -> None:
    """Remove whitespace-only text nodes from ``node`` in place.

    Recurses into every remaining element. Comments are left untouched and
    nodes without children are ignored. Applying it twice changes nothing.
    """
    if not isinstance(node, (Document, Element)):
        return

    kept = []
    for child in node.children:
        if isinstance(child, Text) and not child.text.strip():
            continue
        normalize(child)
        kept.append(child)
    node.children[:] = kept
