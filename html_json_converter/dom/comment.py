"""
Comment node implementation for the converter DOM.
"""

from typing import Optional
from .node import Node, NodeType

class Comment(Node):
    """
    Comment node implementation for the DOM.
    
    Comments are kept in the tree so element child counts match the parsed
    markup, but they never contribute text.
    """
    
    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a comment node.
        
        Args:
            data: The comment text
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.COMMENT_NODE, owner_document)
        
        if data is None:
            data = ""
            
        self.node_name = "#comment"
        self.node_value = data
        self.data = data  # Alias for node_value
    
    @property
    def text_content(self) -> str:
        return ""
