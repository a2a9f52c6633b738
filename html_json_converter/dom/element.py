"""
Element implementation for the converter DOM.
This module implements the DOM Element interface the converter reads from.
"""

from typing import Dict, List, Optional, Tuple
from .node import Node, NodeType

class Element(Node):
    """
    Element node implementation for the DOM.
    
    Attributes are kept in a plain dict so their source order is preserved.
    """
    
    def __init__(self, 
                tag_name: str, 
                namespace: Optional[str] = None,
                owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.
        
        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            namespace: Optional namespace URI
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)
        
        self.tag_name = tag_name.lower()
        self.namespace_uri = namespace
        self.node_name = tag_name.upper() if namespace is None else tag_name
        
        # Element attributes, in source order
        self.attributes: Dict[str, str] = {}
    
    def set_attribute(self, name: str, value: str) -> None:
        """
        Set the value of an attribute.
        
        The first assignment of a name fixes its position; later assignments
        only replace the value.
        
        Args:
            name: The attribute name
            value: The attribute value
        """
        self.attributes[name] = "" if value is None else str(value)
    
    def has_attributes(self) -> bool:
        """Check if the element has any attributes."""
        return len(self.attributes) > 0
    
    def attribute_items(self) -> List[Tuple[str, str]]:
        """Get the (name, value) attribute pairs in source order."""
        return list(self.attributes.items())
    
    def __repr__(self) -> str:
        return f"<Element {self.tag_name}>"
