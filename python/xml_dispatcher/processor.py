"""First-match dispatch of XML payloads to registered handlers.

## Dispatch order

Handlers are consulted in registration order. The first one whose
``can_handle`` returns True has its ``handle`` called, and that result (or
exception) is the outcome of the dispatch. No other handler is consulted
afterwards, even when ``handle`` fails.

## Usage

```python
from xml_dispatcher import XMLProcessor
from xml_dispatcher.handlers import InvoiceHandler, ReportHandler

processor = XMLProcessor()
processor.register_handler(ReportHandler())
processor.register_handler(InvoiceHandler())

record = processor.process_xml(b"<report><data>Hello</data></report>")
```
"""

from typing import Any, Optional, Tuple

from .common.handler import XMLHandler, XMLHandlerRegistry
from .exceptions import NoHandlerFoundError
from .logging_config import logger


class XMLProcessor:
    """Owns an ordered handler registry and routes payloads through it.

    Registration is expected to finish before dispatch traffic starts;
    concurrent registration and dispatch must be serialized by the caller.
    """

    def __init__(self, registry: Optional[XMLHandlerRegistry] = None) -> None:
        """Initialize the processor.

        Args:
            registry: Handler registry to dispatch over (defaults to a new, empty one)
        """
        self.registry = registry if registry is not None else XMLHandlerRegistry()

    def register_handler(self, handler: XMLHandler) -> None:
        """Add a handler after all previously registered ones."""
        self.registry.register(handler)

    @property
    def handlers(self) -> Tuple[XMLHandler, ...]:
        return self.registry.handlers

    def __len__(self) -> int:
        return len(self.registry)

    def process_xml(self, payload: bytes) -> Any:
        """Process a payload with the first handler that recognizes it.

        Args:
            payload: Raw XML document

        Returns:
            Whatever the matching handler's ``handle`` returns

        Raises:
            NoHandlerFoundError: If no registered handler recognizes the payload
            Exception: Any error raised by the matching handler, unchanged
        """
        for handler in self.registry:
            handler_name = type(handler).__name__
            if handler.can_handle(payload):
                logger.debug(f"Dispatching payload to {handler_name}")
                return handler.handle(payload)
            logger.debug(f"{handler_name} does not handle payload")

        logger.warning(
            f"No handler found among {len(self.registry)} registered handlers"
        )
        raise NoHandlerFoundError()
