"""Capability contract every XML payload handler satisfies."""

from abc import ABC, abstractmethod
from typing import Any

HANDLER_METHODS = ("can_handle", "handle")


def is_xml_handler(candidate: Any) -> bool:
    """Check whether an object exposes callable can_handle and handle methods."""
    return all(callable(getattr(candidate, method, None)) for method in HANDLER_METHODS)


class XMLHandler(ABC):
    """Abstract base class for XML payload handlers.

    Splitting recognition from processing lets the dispatcher ask handlers
    in order without side effects, and commit to exactly one of them.

    Objects that are not subclasses but expose callable ``can_handle`` and
    ``handle`` attributes also pass ``isinstance(obj, XMLHandler)``.
    """

    @abstractmethod
    def can_handle(self, payload: bytes) -> bool:
        """Return whether this handler recognizes the payload.

        Must not mutate external state and must not raise for malformed
        input: anything this handler cannot decode is simply not a match.
        """
        pass

    @abstractmethod
    def handle(self, payload: bytes) -> Any:
        """Decode the payload and perform the handler's action.

        Returns:
            The handler's result, passed back verbatim by the dispatcher

        Raises:
            Whatever the underlying decoder raises when the payload cannot be
            decoded into the handler's record.
        """
        pass

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is XMLHandler and is_xml_handler(subclass):
            return True
        return NotImplemented
