"""
Markup-to-tree deserializer.

Walks a parsed element and builds the JSON node model: element nodes are
dicts with ``tag`` and optional ``attributes``/``children``, text nodes are
trimmed strings.
"""

import logging
from typing import Any, Dict, List, Union

from .dom import Element, NodeType
from .elements import ElementRegistry, ElementType
from .exceptions import VoidElementChildrenError

logger = logging.getLogger(__name__)

HTMLNode = Dict[str, Any]
NodeLike = Union[HTMLNode, str]


class JSONBuilder:
    """
    Builder responsible for turning a parsed element tree into HTML nodes.
    
    The registry decides, per tag, whether attributes are kept, whether the
    element may have children, and whether its body is raw text.
    """
    
    def __init__(self, registry: ElementRegistry):
        """
        Initialize the builder.
        
        Args:
            registry: Element classification registry to consult
        """
        self.registry = registry
    
    def build(self, element: Element) -> HTMLNode:
        """
        Build the node for an element and, recursively, its subtree.
        
        Args:
            element: The parsed element
            
        Returns:
            HTMLNode: The element node
            
        Raises:
            VoidElementChildrenError: If a void element has child nodes
        """
        node: HTMLNode = {"tag": element.tag_name.lower()}
        config = self.registry.get_element_config(node["tag"])
        
        if config.allow_attributes:
            self._process_attributes(element, node)
        
        if config.type is ElementType.VOID:
            if element.has_child_nodes():
                raise VoidElementChildrenError(
                    f"Void element <{node['tag']}> must not have children.", node["tag"])
        elif config.type is ElementType.RAW_TEXT:
            text = element.text_content.strip()
            if text:
                node["children"] = [text]
        else:
            children = self._process_children(element)
            if children:
                node["children"] = children
        
        return node
    
    def _process_attributes(self, element: Element, node: HTMLNode) -> None:
        if element.has_attributes():
            node["attributes"] = dict(element.attribute_items())
    
    def _process_children(self, element: Element) -> List[NodeLike]:
        children: List[NodeLike] = []
        for child in element.child_nodes:
            if child.node_type == NodeType.TEXT_NODE:
                text = child.text_content.strip()
                if text:
                    children.append(text)
            elif child.node_type == NodeType.ELEMENT_NODE:
                children.append(self.build(child))
        return children
