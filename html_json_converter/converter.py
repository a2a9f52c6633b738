"""
HTML/JSON converter facade.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .boundary import resolve_root, strip_doctype
from .builder import HTMLNode, JSONBuilder, NodeLike
from .dom import Html5libParser
from .elements import ElementConfigLike, ElementRegistry
from .exceptions import EmptyInputError
from .serializer import HTMLSerializer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterConfig:
    """
    Per-converter settings.
    
    Attributes:
        use_tab: Indent with tabs (True) or pairs of spaces (False)
        tab_size: Indentation units per nesting level
        custom_elements: Element configurations applied to the registry
            when the converter is created
    """
    use_tab: bool = True
    tab_size: int = 1
    custom_elements: Mapping[str, ElementConfigLike] = field(default_factory=dict)


class HTMLJSONConverter:
    """
    Convert HTML to JSON nodes and back.
    
    The markup parser is injected: anything with ``parse(markup) -> Document``
    works, see :mod:`html_json_converter.dom.parser`. The element registry
    is referenced, not copied, so converters built with the same registry
    see each other's registrations.
    """
    
    def __init__(self,
                 config: Optional[ConverterConfig] = None,
                 registry: Optional[ElementRegistry] = None,
                 parser: Optional[Any] = None):
        """
        Initialize the converter.
        
        Args:
            config: Converter settings (defaults: one tab per level)
            registry: Element registry to use; a fresh one is created if omitted
            parser: Markup parser; defaults to :class:`Html5libParser`
        """
        self.config = config or ConverterConfig()
        self.registry = registry if registry is not None else ElementRegistry()
        self.parser = parser if parser is not None else Html5libParser()
        
        if self.config.custom_elements:
            self.registry.register_elements(self.config.custom_elements)
        
        self.builder = JSONBuilder(self.registry)
        self.serializer = HTMLSerializer(self.registry, self.config.use_tab, self.config.tab_size)
        
        logger.debug(f"Converter initialized (parser: {type(self.parser).__name__}, "
                     f"use_tab: {self.config.use_tab}, tab_size: {self.config.tab_size})")
    
    @property
    def use_tab(self) -> bool:
        return self.config.use_tab
    
    @property
    def tab_size(self) -> int:
        return self.config.tab_size
    
    def to_json(self, html: str) -> HTMLNode:
        """
        Convert markup to an HTML node tree.
        
        Args:
            html: A document or fragment
            
        Returns:
            HTMLNode: The root element node
            
        Raises:
            EmptyInputError: If the markup is empty or whitespace only
            NoElementFoundError: If no element can serve as root
            VoidElementChildrenError: If a void element ends up with children
        """
        trimmed = html.strip() if html else ""
        if not trimmed:
            raise EmptyInputError()
        
        # The DOCTYPE-free text only decides fragment vs. document
        without_doctype = strip_doctype(trimmed)
        document = self.parser.parse(trimmed)
        root = resolve_root(without_doctype, document)
        
        logger.debug(f"Converting <{root.tag_name}> to JSON")
        return self.builder.build(root)
    
    def to_html(self, node: NodeLike) -> str:
        """
        Convert an HTML node tree to indented markup.
        
        Args:
            node: Root element node (or a text string)
            
        Returns:
            str: The markup, without a trailing newline
            
        Raises:
            VoidElementChildrenError: If a void element carries children
        """
        return self.serializer.render(node, 0).rstrip()
    
    def register_element(self, tag_name: str, config: ElementConfigLike) -> None:
        self.registry.register_element(tag_name, config)
    
    def register_elements(self, elements: Mapping[str, ElementConfigLike]) -> None:
        self.registry.register_elements(elements)
    
    def remove_element(self, tag_name: str) -> None:
        self.registry.remove_element(tag_name)
    
    def reset_registry(self) -> None:
        """Restore the registry's default HTML5 classifications."""
        self.registry.reset()
