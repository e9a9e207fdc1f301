"""FastAPI integration for the XML dispatcher."""

from .routing import (
    RouteConfig,
    create_xml_router,
    mount_xml_route,
    normalize_prefix,
    read_limited_body,
)

__all__ = [
    "RouteConfig",
    "create_xml_router",
    "mount_xml_route",
    "normalize_prefix",
    "read_limited_body",
]
