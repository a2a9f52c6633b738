"""
Exceptions raised by the HTML/JSON converter.
"""

from typing import Optional


class ConverterError(Exception):
    """
    Base exception for all converter errors.
    
    All custom exceptions inherit from this class, making it easy
    to catch any error from the library.
    
    Attributes:
        message: Human-readable error message
        details: Optional additional error details
    """
    
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class EmptyInputError(ConverterError):
    """
    Markup was empty or whitespace only.
    """
    
    def __init__(self, message: str = "No HTML element found"):
        super().__init__(message)


class NoElementFoundError(ConverterError):
    """
    No element could serve as the conversion root.
    
    Raised for comment-only or text-only markup.
    """
    
    def __init__(self, message: str = "No HTML element found"):
        super().__init__(message)


class VoidElementChildrenError(ConverterError):
    """
    A void element was paired with children.
    
    Raised in both directions: when parsed markup yields children under a
    void tag, and when a tree gives a void tag a non-empty children list.
    """
    
    def __init__(self, message: str, tag: str):
        super().__init__(message, {"tag": tag})
        self.tag = tag


class ConfigurationError(ConverterError):
    """
    Error in configuration.
    
    Raised when a configuration file or element definition is malformed.
    """
    pass
