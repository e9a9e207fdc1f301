"""XML decoding and field extraction."""

from .parser import (
    document_to_dict,
    element_text,
    element_to_dict,
    local_name,
    parse_payload,
)
from .shape import compile_shape, extract

__all__ = [
    "compile_shape",
    "document_to_dict",
    "element_text",
    "element_to_dict",
    "extract",
    "local_name",
    "parse_payload",
]
