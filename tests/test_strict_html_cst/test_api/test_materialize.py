"""Tests for materializing trees into ElementTree constructs."""

import xml.etree.ElementTree as ET

import pytest

from strict_html_cst.api.materialize import (
    DocumentFragment,
    HostElement,
    is_valid_attribute_name,
    materialize,
)
from strict_html_cst.tree.builder import parse
from strict_html_cst.tree.nodes import Attribute, Comment, Element, Text


class TestAttributeNames:
    """Test the live attribute name filter."""

    @pytest.mark.parametrize("name", ["id", "class", "data-role", "h1", "aria-label"])
    def test_valid_names(self, name):
        assert is_valid_attribute_name(name)

    @pytest.mark.parametrize("name", ["a", "[type]", "(click)", "Class", "1a", "-x", "@on", ""])
    def test_invalid_names(self, name):
        assert not is_valid_attribute_name(name)


class TestMaterialize:
    """Test conversion of each node kind."""

    def test_text_becomes_string(self):
        assert materialize(Text("hello")) == "hello"

    def test_comment_becomes_comment_element(self):
        construct = materialize(Comment("note"))

        assert construct.tag is ET.Comment
        assert construct.text == "note"

    def test_element(self):
        element = Element(
            "a",
            attributes=[
                Attribute("href", "/x"),
                Attribute("[y]", "z"),
                Attribute("disabled"),
            ],
            children=[Text("go")],
        )

        construct = materialize(element)

        assert isinstance(construct, HostElement)
        assert construct.tag == "a"
        assert construct.text == "go"
        assert construct.attrib == {"href": "/x", "disabled": ""}
        assert construct.raw_attributes == element.attributes
        assert construct.raw_attributes is not element.attributes

    def test_text_folds_into_text_and_tail(self):
        document = parse('<div id="main" data-role="r">hi<b>bold</b> tail<!-- c --></div>')

        div = materialize(document.children[0])

        assert ET.tostring(div, encoding="unicode") == (
            '<div id="main" data-role="r">hi<b>bold</b> tail<!--c--></div>'
        )

    def test_document_becomes_fragment(self):
        document = parse('<!doctype html><p>a</p>\n<!-- c -->')

        fragment = materialize(document)

        assert isinstance(fragment, DocumentFragment)
        assert fragment.doc_type == " html"
        assert len(fragment) == 3
        assert fragment[0].tag == "p"
        assert fragment[1] == "\n"
        assert fragment[2].tag is ET.Comment

    def test_invalid_node(self):
        with pytest.raises(TypeError, match="Invalid node type: int"):
            materialize(3)


class TestVisitor:
    """Test the post-construction visitor hook."""

    def test_visitor_sees_children_first(self):
        seen = []

        materialize(parse("<ul><li>a</li></ul>"), lambda construct, node: seen.append(node.type.value))

        assert seen == ["text", "element", "element", "document"]

    def test_visitor_replacement(self):
        def upper_text(construct, node):
            if isinstance(node, Text):
                return construct.upper()
            return None

        p = materialize(parse("<p>quiet<b>words</b></p>").children[0], upper_text)

        assert p.text == "QUIET"
        assert p[0].text == "WORDS"

    def test_visitor_none_keeps_construct(self):
        element = materialize(Element("br", self_close=True), lambda construct, node: None)

        assert isinstance(element, HostElement)

    def test_visitor_receives_source_node(self):
        nodes = []

        def record(construct, node):
            nodes.append((type(construct).__name__, node))

        source = Element("hr", self_close=True)
        materialize(source, record)

        assert nodes == [("HostElement", source)]
