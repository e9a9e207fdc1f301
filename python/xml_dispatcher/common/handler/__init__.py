"""Handler contract and registry system."""

from .base import XMLHandler
from .decorators import create_register_decorator, register_handler
from .registry import XMLHandlerRegistry, handler_registry, is_xml_handler
from .root_element import RootElementHandler

__all__ = [
    "RootElementHandler",
    "XMLHandler",
    "XMLHandlerRegistry",
    "create_register_decorator",
    "handler_registry",
    "is_xml_handler",
    "register_handler",
]
