"""Exceptions raised by the XML dispatcher.

Decode failures inside a matched handler are not listed here: they are the
decoding libraries' own exceptions (``lxml.etree.XMLSyntaxError``,
``pydantic.ValidationError``) and reach the caller unwrapped.
"""

NO_HANDLER_FOUND_MESSAGE = "no handler found for the given XML"


class XMLDispatcherError(Exception):
    """Base class for errors raised by this package."""

    pass


class NoHandlerFoundError(XMLDispatcherError, LookupError):
    """Raised when no registered handler recognizes a payload."""

    def __init__(self, message: str = NO_HANDLER_FOUND_MESSAGE) -> None:
        super().__init__(message)


class InvalidHandlerError(XMLDispatcherError, TypeError):
    """Raised when registering an object without can_handle/handle methods."""

    pass


class ConfigurationError(XMLDispatcherError, ValueError):
    """Exception raised for configuration validation errors."""

    pass
