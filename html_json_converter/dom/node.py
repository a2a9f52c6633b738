"""
Node implementation for the converter DOM.
This module implements the subset of the DOM Node interface the converter walks.
"""

from enum import IntEnum
from typing import List, Optional


class NodeType(IntEnum):
    """Node types as defined in the HTML5 specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9


class Node:
    """
    Base Node implementation for the DOM.
    
    Holds the parent/child relationships shared by documents, elements,
    text and comment nodes.
    """
    
    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.
        
        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document
        
        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        
        # Node properties
        self.node_name: str = "#node"
        self.node_value: Optional[str] = None
    
    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]
    
    @property
    def first_element_child(self) -> Optional['Element']:
        """Get the first child that is an element, or None."""
        for child in self.child_nodes:
            if child.node_type == NodeType.ELEMENT_NODE:
                return child
        return None
    
    @property
    def text_content(self) -> str:
        """
        Get the text content of this node and its descendants.
        
        Comments do not contribute; only text nodes are concatenated, in
        document order.
        """
        parts = []
        for child in self.child_nodes:
            if child.node_type == NodeType.TEXT_NODE:
                parts.append(child.node_value or "")
            elif child.node_type == NodeType.ELEMENT_NODE:
                parts.append(child.text_content)
        return "".join(parts)
    
    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.
        
        Args:
            child: The node to append
            
        Returns:
            The appended node
        """
        # If child already has a parent, remove it first
        if child.parent_node:
            child.parent_node.remove_child(child)
        
        child.parent_node = self
        self.child_nodes.append(child)
        return child
    
    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node from this node.
        
        Args:
            child: The node to remove
            
        Returns:
            The removed node
        """
        if child not in self.child_nodes:
            raise ValueError("Child not found in child nodes")
        
        child.parent_node = None
        self.child_nodes.remove(child)
        return child
    
    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.node_name}>"
