"""
Tree-to-markup serializer.

Renders the JSON node model back to indented HTML. The output is the
inverse of :class:`html_json_converter.builder.JSONBuilder`: parsing it and
building again gives back the same tree.
"""

import logging
from typing import Mapping

from .builder import NodeLike
from .elements import ElementRegistry, ElementType
from .exceptions import ConverterError, VoidElementChildrenError

logger = logging.getLogger(__name__)


class HTMLSerializer:
    """Serializer for HTML nodes."""
    
    def __init__(self, registry: ElementRegistry, use_tab: bool = True, tab_size: int = 1):
        """
        Initialize the serializer.
        
        Args:
            registry: Element classification registry to consult
            use_tab: Indent with tabs instead of pairs of spaces
            tab_size: Indentation units per nesting level
        """
        self.registry = registry
        self.use_tab = use_tab
        self.tab_size = tab_size
    
    def indent(self, level: int) -> str:
        if self.use_tab:
            return "\t" * (level * self.tab_size)
        return " " * (level * self.tab_size * 2)
    
    def render(self, node: NodeLike, level: int = 0) -> str:
        """
        Render a node as indented markup.
        
        Every emitted line ends with a newline.
        
        Args:
            node: An element node or a text string
            level: Nesting level of the node
            
        Returns:
            str: The markup
            
        Raises:
            VoidElementChildrenError: If a void element carries children
            ConverterError: If a node is neither an element object nor a string
        """
        if isinstance(node, str):
            text = node.strip()
            return f"{self.indent(level)}{text}\n" if text else ""
        
        if not isinstance(node, Mapping):
            raise ConverterError(f"Cannot render a {type(node).__name__} as a node",
                                 {"level": level})
        
        tag = node["tag"]
        indent = self.indent(level)
        html = f"{indent}<{tag}"
        
        attributes = node.get("attributes")
        if attributes:
            html += self.serialize_attributes(attributes)
        
        config = self.registry.get_element_config(tag)
        children = node.get("children") or []
        
        if config.type is ElementType.VOID:
            if children:
                raise VoidElementChildrenError(
                    f"Void element <{tag}> cannot have children.", tag)
            return f"{html}/>\n"
        
        html += ">"
        
        if config.type is ElementType.RAW_TEXT:
            # Raw text bodies are written as-is, without structural indentation
            html += self._raw_text(tag, children)
        elif children:
            html += "\n"
            for child in children:
                html += self.render(child, level + 1)
            html += indent
        
        return f"{html}</{tag}>\n"
    
    @staticmethod
    def serialize_attributes(attributes: Mapping[str, str]) -> str:
        """Format attributes as ` name="value"` pairs, values verbatim."""
        return "".join(f' {name}="{value}"' for name, value in attributes.items())
    
    @staticmethod
    def _raw_text(tag: str, children) -> str:
        parts = []
        for child in children:
            if isinstance(child, str):
                parts.append(child)
            else:
                logger.warning(f"Ignoring element child of raw text element <{tag}>")
        return "".join(parts).strip()
