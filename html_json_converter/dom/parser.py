"""
Markup parsers producing converter DOM documents.

Two interchangeable capabilities are provided. ``Html5libParser`` drives the
html5lib engine directly and walks the minidom tree it builds.
``SoupParser`` goes through BeautifulSoup, and can also adopt a soup the
caller already parsed. Both rely on the HTML5 tree construction rules for
error recovery, so fragments come back wrapped in html/head/body.
"""

import logging
from typing import Optional

import html5lib
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment as SoupComment
from bs4.element import PreformattedString

from .document import Document
from .element import Element
from .node import Node

logger = logging.getLogger(__name__)

# minidom node type constants
_ELEMENT_NODE = 1
_TEXT_NODE = 3
_CDATA_SECTION_NODE = 4
_COMMENT_NODE = 8


class Html5libParser:
    """HTML parser running html5lib with its ``dom`` tree builder."""
    
    name = "html5lib"
    
    def __init__(self):
        """Initialize the HTML parser."""
        self._parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        logger.debug("html5lib parser initialized")
    
    def parse(self, html_content: str) -> Document:
        """
        Parse HTML content into a Document.
        
        Args:
            html_content: The HTML content to parse
            
        Returns:
            The parsed Document
        """
        parsed = self._parser.parse(html_content)
        document = Document()
        
        root = parsed.documentElement
        if root is not None:
            document.set_document_element(self._convert_element(root, document))
        else:
            logger.warning("html5lib returned a document without a root element")
        
        return document
    
    def _convert_element(self, node, document: Document) -> Element:
        """
        Convert an html5lib minidom element, and its subtree, to our Element.
        
        Args:
            node: The minidom element
            document: The owner document
            
        Returns:
            The converted element
        """
        element = document.create_element(node.tagName, getattr(node, 'namespaceURI', None))
        
        if node.attributes is not None:
            for name, value in node.attributes.items():
                element.set_attribute(name, value)
        
        for child in node.childNodes:
            converted = self._convert_node(child, document)
            if converted is not None:
                element.append_child(converted)
        
        return element
    
    def _convert_node(self, node, document: Document) -> Optional[Node]:
        node_type = node.nodeType
        if node_type == _ELEMENT_NODE:
            return self._convert_element(node, document)
        if node_type in (_TEXT_NODE, _CDATA_SECTION_NODE):
            return document.create_text_node(node.data)
        if node_type == _COMMENT_NODE:
            return document.create_comment(node.data)
        return None


class SoupParser:
    """
    HTML parser going through BeautifulSoup with the html5lib tree builder.
    
    Multi-valued attribute splitting is disabled so ``class`` and friends
    keep the exact string found in the markup.
    """
    
    name = "soup"
    
    features = "html5lib"
    
    def __init__(self):
        """Initialize the parser."""
        logger.debug("BeautifulSoup parser initialized")
    
    def parse(self, html_content: str) -> Document:
        """
        Parse HTML content into a Document.
        
        Args:
            html_content: The HTML content to parse
            
        Returns:
            The parsed Document
        """
        soup = BeautifulSoup(html_content, self.features, multi_valued_attributes=None)
        return self.from_soup(soup)
    
    @classmethod
    def from_soup(cls, soup: BeautifulSoup) -> Document:
        """
        Convert an already parsed BeautifulSoup object into a Document.
        
        Soups built by another tree builder (``html.parser``, ``lxml``) do
        not wrap fragments in html/head/body. Those are serialized and
        parsed again with html5lib so the document always has its
        scaffolding.
        
        Args:
            soup: The parsed soup
            
        Returns:
            The converted Document
        """
        builder_name = getattr(soup.builder, 'NAME', None)
        if builder_name != cls.features:
            logger.debug(f"Re-parsing soup built by {builder_name} with {cls.features}")
            soup = BeautifulSoup(str(soup), cls.features, multi_valued_attributes=None)
        
        document = Document()
        
        root = soup.find(True, recursive=False)
        if root is not None:
            document.set_document_element(cls._convert_tag(root, document))
        else:
            logger.warning("BeautifulSoup returned a document without a root element")
        
        return document
    
    @classmethod
    def _convert_tag(cls, tag: Tag, document: Document) -> Element:
        element = document.create_element(tag.name, getattr(tag, 'namespace', None))
        
        for name, value in tag.attrs.items():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            element.set_attribute(name, value)
        
        for child in tag.children:
            if isinstance(child, Tag):
                element.append_child(cls._convert_tag(child, document))
            elif isinstance(child, SoupComment):
                element.append_child(document.create_comment(str(child)))
            elif isinstance(child, PreformattedString):
                # Doctypes, declarations and processing instructions
                continue
            elif isinstance(child, NavigableString):
                element.append_child(document.create_text_node(str(child)))
        
        return element


PARSERS = {
    Html5libParser.name: Html5libParser,
    SoupParser.name: SoupParser,
}


def get_parser(name: str):
    """
    Create a parser by name.
    
    Args:
        name: "html5lib" or "soup"
        
    Returns:
        A new parser instance
    """
    try:
        return PARSERS[name]()
    except KeyError:
        raise ValueError(f"Unknown parser: {name}. Available: {', '.join(sorted(PARSERS))}") from None
