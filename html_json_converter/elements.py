"""
Element classification registry.

Maps tag names to the behaviour class the converter applies to them: normal
elements, void elements (no children, self-closed), raw-text elements (body
kept as opaque text) and foreign elements (SVG/MathML, walked like normal
elements).
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ElementType(Enum):
    """Behaviour classes for HTML elements."""
    NORMAL = "normal"
    VOID = "void"
    RAW_TEXT = "raw-text"
    FOREIGN = "foreign"


@dataclass(frozen=True)
class ElementTypeConfig:
    """How the converter treats one tag."""
    type: ElementType = ElementType.NORMAL
    allow_children: bool = True
    allow_attributes: bool = True
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ElementTypeConfig':
        """
        Build a config from its configuration-file form.
        
        Args:
            data: Mapping with "type" and optional "allow_children" /
                "allow_attributes" keys
            
        Returns:
            ElementTypeConfig: The parsed config
            
        Raises:
            ConfigurationError: If the type name is unknown
        """
        type_name = data.get("type", ElementType.NORMAL.value)
        try:
            element_type = ElementType(type_name)
        except ValueError:
            valid = ", ".join(t.value for t in ElementType)
            raise ConfigurationError(f"Unknown element type '{type_name}'",
                                     {"valid_types": valid}) from None
        
        allow_children = data.get("allow_children", element_type is not ElementType.VOID)
        allow_attributes = data.get("allow_attributes", True)
        return cls(element_type, bool(allow_children), bool(allow_attributes))
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "allow_children": self.allow_children,
            "allow_attributes": self.allow_attributes,
        }


NORMAL_ELEMENT = ElementTypeConfig(ElementType.NORMAL, True, True)
VOID_ELEMENT = ElementTypeConfig(ElementType.VOID, False, True)
RAW_TEXT_ELEMENT = ElementTypeConfig(ElementType.RAW_TEXT, True, True)
FOREIGN_ELEMENT = ElementTypeConfig(ElementType.FOREIGN, True, True)

HTML5_NORMAL_ELEMENTS = (
    'a', 'abbr', 'address', 'article', 'aside', 'audio', 'b', 'bdi', 'bdo',
    'blockquote', 'body', 'button', 'canvas', 'caption', 'cite', 'code',
    'colgroup', 'data', 'datalist', 'dd', 'del', 'details', 'dfn', 'dialog',
    'div', 'dl', 'dt', 'em', 'fieldset', 'figcaption', 'figure', 'footer',
    'form', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'hgroup',
    'html', 'i', 'iframe', 'ins', 'kbd', 'label', 'legend', 'li', 'main',
    'map', 'mark', 'menu', 'meter', 'nav', 'noscript', 'object', 'ol',
    'optgroup', 'option', 'output', 'p', 'picture', 'pre', 'progress', 'q',
    'rp', 'rt', 'ruby', 's', 'samp', 'section', 'select', 'small', 'span',
    'strong', 'sub', 'summary', 'sup', 'table', 'tbody', 'td', 'template',
    'tfoot', 'th', 'thead', 'time', 'tr', 'u', 'ul', 'var', 'video',
)

# Set of HTML5 void elements (self-closing tags)
HTML5_VOID_ELEMENTS = (
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'keygen',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
)

HTML5_RAW_TEXT_ELEMENTS = ('script', 'style', 'textarea', 'title')

HTML5_FOREIGN_ELEMENTS = ('svg', 'math')


def _default_elements() -> Dict[str, ElementTypeConfig]:
    defaults = {}
    defaults.update((tag, NORMAL_ELEMENT) for tag in HTML5_NORMAL_ELEMENTS)
    defaults.update((tag, VOID_ELEMENT) for tag in HTML5_VOID_ELEMENTS)
    defaults.update((tag, RAW_TEXT_ELEMENT) for tag in HTML5_RAW_TEXT_ELEMENTS)
    defaults.update((tag, FOREIGN_ELEMENT) for tag in HTML5_FOREIGN_ELEMENTS)
    return defaults


DEFAULT_ELEMENTS: Mapping[str, ElementTypeConfig] = _default_elements()

ElementConfigLike = Union[ElementTypeConfig, Mapping[str, Any]]


def _coerce_config(config: ElementConfigLike) -> ElementTypeConfig:
    if isinstance(config, ElementTypeConfig):
        return config
    return ElementTypeConfig.from_dict(config)


class ElementRegistry:
    """
    Registry of element configurations.
    
    Seeded with the HTML5 tag set. Lookups are case-insensitive and unknown
    tags fall back to a normal element. A registry is an ordinary object:
    converters that should share classifications are handed the same
    instance.
    """
    
    def __init__(self):
        """Initialize the registry with the default HTML5 elements."""
        self._lock = threading.RLock()
        self._element_configs: Dict[str, ElementTypeConfig] = dict(DEFAULT_ELEMENTS)
    
    def get_element_config(self, tag_name: str) -> ElementTypeConfig:
        """
        Get the configuration for an element.
        
        Args:
            tag_name: Tag name, in any case
            
        Returns:
            ElementTypeConfig: The registered config, or the normal default
        """
        with self._lock:
            return self._element_configs.get(tag_name.lower(), NORMAL_ELEMENT)
    
    def get_element_type(self, tag_name: str) -> ElementType:
        return self.get_element_config(tag_name).type
    
    def register_element(self, tag_name: str, config: ElementConfigLike) -> None:
        """
        Register a new element with its configuration.
        
        Args:
            tag_name: Tag name, stored lower-cased
            config: ElementTypeConfig or its dict form
        """
        config = _coerce_config(config)
        with self._lock:
            self._element_configs[tag_name.lower()] = config
        logger.debug(f"Registered element <{tag_name.lower()}> as {config.type.value}")
    
    def register_elements(self, elements: Mapping[str, ElementConfigLike]) -> None:
        """
        Register multiple elements with their configurations.
        
        Entries are applied in mapping order, so a later entry for the same
        tag wins.
        
        Args:
            elements: Mapping of tag name to configuration
        """
        with self._lock:
            for tag_name, config in elements.items():
                self.register_element(tag_name, config)
    
    def remove_element(self, tag_name: str) -> None:
        """
        Remove an element from the registry.
        
        Later lookups of the tag get the normal default, not the seeded value.
        
        Args:
            tag_name: Tag name, in any case
        """
        with self._lock:
            self._element_configs.pop(tag_name.lower(), None)
    
    def reset(self) -> None:
        """Restore exactly the default HTML5 element table."""
        with self._lock:
            self._element_configs = dict(DEFAULT_ELEMENTS)
        logger.debug("Element registry reset to defaults")
    
    def __contains__(self, tag_name: str) -> bool:
        with self._lock:
            return tag_name.lower() in self._element_configs
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._element_configs)
