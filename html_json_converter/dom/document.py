"""
Document implementation for the converter DOM.
"""

import logging
from typing import Optional

from .node import Node, NodeType
from .element import Element
from .text import Text
from .comment import Comment

logger = logging.getLogger(__name__)

class Document(Node):
    """
    Document node implementation for the DOM.
    
    A document is filled in by one of the parsers in
    :mod:`html_json_converter.dom.parser`; afterwards ``document_element``,
    ``head`` and ``body`` point at the parsed scaffolding.
    """
    
    def __init__(self):
        """Initialize a new, empty Document object."""
        super().__init__(NodeType.DOCUMENT_NODE)
        self.node_name = "#document"
        self.document_element: Optional[Element] = None
        self.head: Optional[Element] = None
        self.body: Optional[Element] = None
    
    def create_element(self, tag_name: str, namespace: Optional[str] = None) -> Element:
        """
        Create a new element owned by this document.
        
        Args:
            tag_name: The tag name of the element
            namespace: Optional namespace URI
            
        Returns:
            The new element
        """
        return Element(tag_name, namespace, self)
    
    def create_text_node(self, data: str) -> Text:
        return Text(data, self)
    
    def create_comment(self, data: str) -> Comment:
        return Comment(data, self)
    
    def set_document_element(self, element: Element) -> None:
        """
        Attach the root element and update head and body references.
        
        Args:
            element: The root element of the parsed tree
        """
        self.append_child(element)
        self.document_element = element
        self._update_references()
    
    def _update_references(self) -> None:
        """Update references to the head and body elements."""
        self.head = None
        self.body = None
        
        if not self.document_element:
            return
        
        # Directly search for head and body as children of html
        for child in self.document_element.children:
            if child.tag_name == 'head' and self.head is None:
                self.head = child
            elif child.tag_name == 'body' and self.body is None:
                self.body = child
        
        logger.debug(f"Document references updated (head: {self.head is not None}, "
                     f"body: {self.body is not None})")
