"""Configuration management for the XML dispatcher.

All settings come from environment variables prefixed with ``XML_DISPATCHER_``:

- XML_DISPATCHER_RESOLVE_ENTITIES=false (let the parser expand entities)
- XML_DISPATCHER_HUGE_TREE=false (lift the parser's tree size limits)
- XML_DISPATCHER_ROUTE_PATH=/xml (path of the HTTP route)
- XML_DISPATCHER_MAX_PAYLOAD_BYTES=1048576 (payload cap for HTTP and CLI)

The log level is read separately by ``logging_config`` (XML_DISPATCHER_LOG_LEVEL).
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)

MAX_PAYLOAD_BYTES_LIMIT = 1024 * 1024 * 1024


class DispatcherEnvVars:
    """XML dispatcher environment variable names."""

    RESOLVE_ENTITIES = "XML_DISPATCHER_RESOLVE_ENTITIES"
    HUGE_TREE = "XML_DISPATCHER_HUGE_TREE"
    ROUTE_PATH = "XML_DISPATCHER_ROUTE_PATH"
    MAX_PAYLOAD_BYTES = "XML_DISPATCHER_MAX_PAYLOAD_BYTES"


@dataclass(frozen=True)
class DispatcherConfig:
    """Settings shared by the XML parser and the outer HTTP/CLI layers."""

    resolve_entities: bool = False
    huge_tree: bool = False
    route_path: str = "/xml"
    max_payload_bytes: int = 1024 * 1024


def _parse_bool(name: str, default: bool) -> bool:
    """Parse boolean from an environment variable."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in ("true", "1", "yes", "on"):
        return True
    if normalized in ("false", "0", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{value}'")


def _get_env_int(name: str, default: int, min_val: int, max_val: int) -> int:
    """Get integer from environment with validation."""
    value = os.getenv(name)
    if not value:
        return default

    try:
        parsed = int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'")

    if not (min_val <= parsed <= max_val):
        raise ConfigurationError(
            f"{name} must be between {min_val} and {max_val}, got {parsed}"
        )
    return parsed


def _get_route_path(name: str, default: str) -> str:
    value = os.getenv(name, default).strip()
    if not value.startswith("/"):
        raise ConfigurationError(f"{name} must start with '/', got '{value}'")
    return value


def parse_environment_variables() -> DispatcherConfig:
    """Parse environment variables and return a DispatcherConfig instance."""
    defaults = DispatcherConfig()
    try:
        return DispatcherConfig(
            resolve_entities=_parse_bool(
                DispatcherEnvVars.RESOLVE_ENTITIES, defaults.resolve_entities
            ),
            huge_tree=_parse_bool(DispatcherEnvVars.HUGE_TREE, defaults.huge_tree),
            route_path=_get_route_path(
                DispatcherEnvVars.ROUTE_PATH, defaults.route_path
            ),
            max_payload_bytes=_get_env_int(
                DispatcherEnvVars.MAX_PAYLOAD_BYTES,
                defaults.max_payload_bytes,
                1,
                MAX_PAYLOAD_BYTES_LIMIT,
            ),
        )
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
