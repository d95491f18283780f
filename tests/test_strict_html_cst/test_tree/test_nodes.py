"""Tests for the concrete syntax tree node types."""

import pytest

from strict_html_cst.tree.nodes import (
    Attribute,
    Comment,
    Document,
    Element,
    NodeType,
    Text,
)


class TestNodeTypes:
    """Test node construction and type tags."""

    def test_type_tags(self):
        assert Document().type is NodeType.DOCUMENT
        assert Element("p").type is NodeType.ELEMENT
        assert Comment("c").type is NodeType.COMMENT
        assert Text("t").type is NodeType.TEXT

    def test_document_defaults(self):
        document = Document()

        assert document.doc_type == "html"
        assert document.children == []

    def test_element_defaults(self):
        element = Element("div")

        assert element.self_close is False
        assert element.attributes == []
        assert element.children == []

    def test_empty_tag_rejected(self):
        with pytest.raises(ValueError, match="Element tag cannot be empty"):
            Element("")

    def test_structural_equality(self):
        first = Element("p", attributes=[Attribute("id", "a")], children=[Text("x")])
        second = Element("p", attributes=[Attribute("id", "a")], children=[Text("x")])

        assert first == second
        assert first != Element("p", children=[Text("y")])
        assert Text("x") != Comment("x")


class TestElementQueries:
    """Test attribute and descendant lookup helpers."""

    @pytest.fixture
    def tree(self):
        return Document(
            children=[
                Element(
                    "ul",
                    attributes=[Attribute("class", "a"), Attribute("class", "b"), Attribute("hidden")],
                    children=[
                        Element("li", children=[Text("one")]),
                        Comment("note"),
                        Element("li", children=[Element("b", children=[Text("two")])]),
                    ],
                )
            ]
        )

    def test_get_attribute_returns_first_duplicate(self, tree):
        ul = tree.children[0]

        assert ul.get_attribute("class") == "a"
        assert ul.get_attribute("hidden") == ""
        assert ul.get_attribute("missing") is None
        assert ul.get_attribute("missing", "fallback") == "fallback"

    def test_has_attribute(self, tree):
        ul = tree.children[0]

        assert ul.has_attribute("hidden")
        assert not ul.has_attribute("id")

    def test_iter_elements_in_document_order(self, tree):
        assert [element.tag for element in tree.iter_elements()] == ["ul", "li", "li", "b"]

    def test_find_all(self, tree):
        assert len(tree.find_all("li")) == 2
        assert tree.children[0].find_all("b")[0].children == [Text("two")]
        assert tree.find_all("table") == []


class TestToDict:
    """Test plain dictionary conversion."""

    def test_document_to_dict(self):
        document = Document(
            children=[
                Element(
                    "input",
                    self_close=True,
                    attributes=[Attribute("type", "text")],
                ),
                Comment("comment"),
                Text("text only"),
            ]
        )

        assert document.to_dict() == {
            "type": "document",
            "docType": "html",
            "children": [
                {
                    "type": "element",
                    "tag": "input",
                    "selfClose": True,
                    "attributes": [{"name": "type", "value": "text"}],
                    "children": [],
                },
                {"type": "comment", "text": "comment"},
                {"type": "text", "text": "text only"},
            ],
        }
