"""
HTML/JSON Converter - convert HTML documents and fragments to JSON node trees and back.
"""

from html_json_converter.converter import ConverterConfig, HTMLJSONConverter
from html_json_converter.elements import ElementRegistry, ElementType, ElementTypeConfig
from html_json_converter.dom import Html5libParser, SoupParser
from html_json_converter.exceptions import (
    ConfigurationError,
    ConverterError,
    EmptyInputError,
    NoElementFoundError,
    VoidElementChildrenError,
)

# Package information
__version__ = "1.0.0"
__author__ = "HTML JSON Converter Team"
__description__ = "Convert HTML to JSON node trees and back"

__all__ = [
    'HTMLJSONConverter',
    'ConverterConfig',
    'ElementRegistry',
    'ElementType',
    'ElementTypeConfig',
    'Html5libParser',
    'SoupParser',
    'ConverterError',
    'EmptyInputError',
    'NoElementFoundError',
    'VoidElementChildrenError',
    'ConfigurationError',
]
