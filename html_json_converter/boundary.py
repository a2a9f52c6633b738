"""
Document boundary resolution.

HTML parsers wrap fragments in implicit html/head/body elements. These
helpers pick the element the caller actually meant as the root: the html
element for full documents, otherwise the first element of the body (or of
the head, where the tree builder moves title/meta/script/style fragments).
"""

import logging
import re

from .dom import Document, Element
from .exceptions import NoElementFoundError

logger = logging.getLogger(__name__)

DOCUMENT_INDICATORS = ("<html", "<?xml")

_DOCTYPE_RE = re.compile(r'^\s*<!DOCTYPE[^>]*>', re.IGNORECASE)
_HEAD_TAG_RE = re.compile(r'<head(?=[\s/>]|$)', re.IGNORECASE)


def strip_doctype(markup: str) -> str:
    """
    Remove a leading DOCTYPE declaration and surrounding whitespace.
    
    Args:
        markup: Raw markup
        
    Returns:
        str: The trimmed markup without its DOCTYPE
    """
    return _DOCTYPE_RE.sub("", markup, count=1).strip()


def is_full_document(markup: str) -> bool:
    """
    Check whether markup is a complete document rather than a fragment.
    
    Args:
        markup: Markup with any DOCTYPE already removed
    """
    lowered = markup.strip().lower()
    return any(lowered.startswith(indicator) for indicator in DOCUMENT_INDICATORS)


def resolve_root(markup: str, document: Document) -> Element:
    """
    Choose the conversion root of a parsed document.
    
    Args:
        markup: The DOCTYPE-stripped markup the document was parsed from
        document: The parsed document
        
    Returns:
        Element: The element to convert
        
    Raises:
        NoElementFoundError: If neither body nor head holds an element
    """
    root = document.document_element
    if is_full_document(markup) and root is not None and root.tag_name == "html":
        logger.debug("Markup is a full document, using <html> as root")
        return root
    
    head_element = document.head.first_element_child if document.head is not None else None
    body_element = document.body.first_element_child if document.body is not None else None
    
    if head_element is None and body_element is None:
        raise NoElementFoundError()
    
    # <header> and other tags sharing the prefix are ordinary fragments
    if _HEAD_TAG_RE.match(markup.strip()):
        logger.debug("Markup starts with <head>, using the head element as root")
        return document.head
    
    return body_element if body_element is not None else head_element
