"""Ordered registry of XML handlers."""

from typing import Iterator, List, Tuple

from ...exceptions import InvalidHandlerError
from ...logging_config import logger
from .base import XMLHandler, is_xml_handler


class XMLHandlerRegistry:
    """Registry keeping handlers in registration order.

    Registration order is match priority. Entries are never deduplicated,
    reordered or removed implicitly.
    """

    def __init__(self) -> None:
        self._handlers: List[XMLHandler] = []

    def register(self, handler: XMLHandler) -> None:
        """Append a handler to the end of the registry.

        Args:
            handler: Any object satisfying the XMLHandler contract

        Raises:
            InvalidHandlerError: If the object lacks can_handle or handle
        """
        if not is_xml_handler(handler):
            raise InvalidHandlerError(
                f"{type(handler).__name__} must define callable "
                "can_handle(payload) and handle(payload) methods"
            )
        self._handlers.append(handler)
        logger.info(
            f"Registered XML handler {type(handler).__name__} "
            f"at position {len(self._handlers) - 1}"
        )

    @property
    def handlers(self) -> Tuple[XMLHandler, ...]:
        """Snapshot of registered handlers in priority order."""
        return tuple(self._handlers)

    def __iter__(self) -> Iterator[XMLHandler]:
        return iter(self.handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def clear(self) -> None:
        """Clear all registered handlers."""
        self._handlers.clear()


# Global registry instance
handler_registry = XMLHandlerRegistry()
