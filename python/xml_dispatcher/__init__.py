"""XML dispatcher.

Routes XML payloads to the first registered handler that recognizes them.
FastAPI integration is imported from its submodule:
- from xml_dispatcher.common.fastapi import create_xml_router
"""

from .common.handler import (
    RootElementHandler,
    XMLHandler,
    XMLHandlerRegistry,
    handler_registry,
    register_handler,
)
from .exceptions import (
    ConfigurationError,
    InvalidHandlerError,
    NoHandlerFoundError,
    XMLDispatcherError,
)
from .processor import XMLProcessor

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidHandlerError",
    "NoHandlerFoundError",
    "RootElementHandler",
    "XMLDispatcherError",
    "XMLHandler",
    "XMLHandlerRegistry",
    "XMLProcessor",
    "handler_registry",
    "register_handler",
]
