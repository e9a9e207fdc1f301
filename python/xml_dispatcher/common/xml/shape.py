"""Field extraction shapes.

A shape maps record field names to JMESPath expressions evaluated against the
output of ``document_to_dict``. Nested dictionaries produce nested results.
"""

from typing import Any, Dict

import jmespath
from jmespath.parser import ParsedResult

from ...logging_config import logger
from .parser import TEXT_KEY


def compile_shape(shape: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively compile JMESPath expressions in the shape dictionary.

    :param Dict[str, Any] shape: Dictionary containing JMESPath expressions to compile
    :return Dict[str, Any]: Dictionary with compiled JMESPath expressions
    """
    compiled_shape = {}
    for key, value in shape.items():
        if isinstance(value, str):
            compiled_shape[key] = jmespath.compile(value)
        elif isinstance(value, dict):
            compiled_shape[key] = compile_shape(value)
        else:
            logger.warning(
                f"Record shape must be a dictionary of strings (nested allowed), not {type(value)}. This value will be ignored."
            )
    return compiled_shape


def extract(source_data: Dict[str, Any], compiled_shape: Dict[str, Any]) -> Dict[str, Any]:
    """Apply a compiled shape to decoded document data.

    Expressions that find nothing are left out of the result, so the record
    model's defaults apply to absent elements. An expression that lands on
    an element with attributes or children yields that element's own text.
    """
    extracted: Dict[str, Any] = {}
    for target_key, nested_or_compiled in compiled_shape.items():
        if isinstance(nested_or_compiled, ParsedResult):
            value = nested_or_compiled.search(source_data)
            if isinstance(value, dict):
                value = value.get(TEXT_KEY, "")
            if value is not None:
                extracted[target_key] = value
        elif isinstance(nested_or_compiled, dict):
            extracted[target_key] = extract(source_data, nested_or_compiled)
    return extracted
