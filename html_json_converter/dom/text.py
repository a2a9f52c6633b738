"""
Text node implementation for the converter DOM.
"""

from typing import Optional
from .node import Node, NodeType

class Text(Node):
    """
    Text node implementation for the DOM.
    
    This class represents a run of character data in the DOM tree.
    """
    
    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.
        
        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)
        
        if data is None:
            data = ""
            
        self.node_name = "#text"
        self.node_value = data
        self.data = data  # Alias for node_value
    
    @property
    def text_content(self) -> str:
        """Get the text content of this text node."""
        return self.data
