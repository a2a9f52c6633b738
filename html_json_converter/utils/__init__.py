"""
Utility modules for the converter.
"""

from html_json_converter.utils.config import Config
from html_json_converter.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
