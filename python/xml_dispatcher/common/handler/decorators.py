"""Class decorator registering XML handlers with a registry."""

from typing import Any, Callable, Optional, Type, TypeVar

from ...logging_config import logger
from .registry import XMLHandlerRegistry, handler_registry

T = TypeVar("T", bound=type)


def create_register_decorator(registry: XMLHandlerRegistry) -> Callable:
    """Create a decorator that instantiates a handler class and registers it.

    Args:
        registry: Registry that receives the instances, in decoration order.

    Returns:
        A decorator supporting both @decorator and @decorator(**init_kwargs) syntax.
        The decorated class is returned unchanged.
    """

    def register_decorator(
        cls: Optional[Type[Any]] = None, **init_kwargs: Any
    ) -> Any:
        # Handle both @decorator and @decorator() syntax
        if cls is None:

            def wrapper(c: T) -> T:
                return register_decorator(c, **init_kwargs)

            return wrapper

        logger.debug(f"@register_handler decorator called on class: {cls.__name__}")
        registry.register(cls(**init_kwargs))
        return cls

    return register_decorator


register_handler = create_register_decorator(handler_registry)
