"""Tests for the markup parsers and the DOM they build."""

import pytest
from bs4 import BeautifulSoup

from html_json_converter.boundary import resolve_root
from html_json_converter.dom import (
    Document,
    Html5libParser,
    NodeType,
    SoupParser,
    get_parser,
)


@pytest.fixture(params=[Html5libParser, SoupParser], ids=["html5lib", "soup"])
def parser(request):
    return request.param()


class TestParsedDocument:

    def test_fragment_is_wrapped(self, parser):
        document = parser.parse("<p>x</p>")
        assert isinstance(document, Document)
        assert document.document_element.tag_name == "html"
        assert document.head.tag_name == "head"
        assert document.body.tag_name == "body"
        assert document.body.first_element_child.tag_name == "p"

    def test_attribute_order_and_values(self, parser):
        document = parser.parse('<div id="main" class="a b" data-x="1">y</div>')
        div = document.body.first_element_child
        assert div.attribute_items() == [("id", "main"), ("class", "a b"), ("data-x", "1")]

    def test_text_and_comment_nodes(self, parser):
        document = parser.parse("<div>one<!-- c -->two</div>")
        div = document.body.first_element_child
        assert [child.node_type for child in div.child_nodes] == [
            NodeType.TEXT_NODE, NodeType.COMMENT_NODE, NodeType.TEXT_NODE]
        assert div.text_content == "onetwo"

    def test_script_body_is_one_text_node(self, parser):
        document = parser.parse("<script>if (a < b) { x(); }</script>")
        script = document.head.first_element_child
        assert script.tag_name == "script"
        assert len(script.child_nodes) == 1
        assert script.text_content == "if (a < b) { x(); }"

    def test_void_elements_have_no_children(self, parser):
        document = parser.parse("<img src='a.png'>text")
        img = document.body.first_element_child
        assert img.tag_name == "img"
        assert not img.has_child_nodes()

    def test_foreign_tag_names(self, parser):
        document = parser.parse('<svg width="10"><circle r="1"></circle></svg>')
        svg = document.body.first_element_child
        assert svg.tag_name == "svg"
        assert svg.first_element_child.tag_name == "circle"

    def test_nested_text_content(self, parser):
        document = parser.parse("<ul><li>a</li><li>b</li></ul>")
        items = document.body.first_element_child.children
        assert [item.text_content for item in items] == ["a", "b"]


class TestSoupParser:

    def test_from_soup(self):
        soup = BeautifulSoup('<article class="x y">Hi</article>', "html5lib")
        document = SoupParser.from_soup(soup)
        article = document.body.first_element_child
        assert article.tag_name == "article"
        assert article.attributes == {"class": "x y"}

    @pytest.mark.parametrize("features", ["html.parser", "html5lib"])
    def test_from_soup_of_any_tree_builder(self, features):
        soup = BeautifulSoup('<div class="a b">x</div><p>y</p>', features)
        document = SoupParser.from_soup(soup)
        assert document.head.tag_name == "head"
        div = document.body.first_element_child
        assert div.tag_name == "div"
        assert div.attributes == {"class": "a b"}
        assert div.text_content == "x"

    def test_converter_accepts_html_parser_soup(self):
        soup = BeautifulSoup("<section><h2>T</h2></section>", "html.parser")
        root = resolve_root("<section>", SoupParser.from_soup(soup))
        assert root.tag_name == "section"
        assert root.first_element_child.tag_name == "h2"

    def test_always_uses_html5lib(self):
        document = SoupParser().parse("<div>x</div>")
        assert SoupParser.features == "html5lib"
        assert document.body.first_element_child.tag_name == "div"


class TestGetParser:

    def test_known_parsers(self):
        assert isinstance(get_parser("html5lib"), Html5libParser)
        assert isinstance(get_parser("soup"), SoupParser)

    def test_unknown_parser(self):
        with pytest.raises(ValueError, match="Unknown parser: lxml"):
            get_parser("lxml")
