"""Prompt-related schemas."""

from .output_schemas import (
    TRANSLATE_FUNCTION_NAME,
    get_function_schema,
    get_simple_function_schema,
    to_tool,
    validate_function_args,
)

__all__ = [
    "TRANSLATE_FUNCTION_NAME",
    "get_function_schema",
    "get_simple_function_schema",
    "to_tool",
    "validate_function_args",
]
