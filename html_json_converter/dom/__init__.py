"""
Minimal DOM used by the converter.
This package provides the node classes the converter walks, and the parsers
that build them from markup.
"""

from .node import Node, NodeType
from .element import Element
from .text import Text
from .comment import Comment
from .document import Document
from .parser import Html5libParser, SoupParser, get_parser

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'Comment', 'Document',
    'Html5libParser', 'SoupParser', 'get_parser'
]
