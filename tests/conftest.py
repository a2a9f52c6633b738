"""
Pytest configuration and fixtures.
"""

import logging

import pytest

from html_json_converter import ConverterConfig, ElementRegistry, HTMLJSONConverter
from html_json_converter.dom import Html5libParser, SoupParser
from html_json_converter.utils.logging import LOGGER_NAME


@pytest.fixture
def registry():
    """Provide a fresh element registry."""
    return ElementRegistry()


@pytest.fixture
def converter(registry):
    """Provide a tab-indented converter using the html5lib engine."""
    return HTMLJSONConverter(ConverterConfig(use_tab=True, tab_size=1), registry=registry)


@pytest.fixture(params=[Html5libParser, SoupParser], ids=["html5lib", "soup"])
def any_converter(request):
    """Provide a converter for each markup parser."""
    return HTMLJSONConverter(parser=request.param())


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so they don't outlive captured streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
