"""Function-calling schemas for structured translation output.

The model is offered a ``translate_text`` function; when it calls it, the
arguments carry the translation in a fixed shape instead of free text.
"""

from typing import Any, Dict, List, Mapping, Optional, TypedDict

TRANSLATE_FUNCTION_NAME = "translate_text"

# Arguments that must be non-empty strings for a call to be usable
REQUIRED_CALL_FIELDS = ("sourceLang", "targetLang", "translatedText")


class OutputFieldSchema(TypedDict):
    """Schema definition for a single function parameter."""
    name: str           # Parameter name (camelCase, as sent to the model)
    description: str    # Human-readable description
    type: str          # JSON schema type: "string" or "number"
    required: bool


# =============================================================================
# translate_text parameters
# =============================================================================

TRANSLATE_TEXT_FIELDS: List[OutputFieldSchema] = [
    {
        "name": "text",
        "description": "The original text to be translated",
        "type": "string",
        "required": True,
    },
    {
        "name": "sourceLang",
        "description": "The detected or specified source language",
        "type": "string",
        "required": True,
    },
    {
        "name": "targetLang",
        "description": "The target language for translation",
        "type": "string",
        "required": True,
    },
    {
        "name": "translatedText",
        "description": "The translated text in the target language",
        "type": "string",
        "required": True,
    },
    {
        "name": "confidence",
        "description": "Confidence level of the translation (0-1)",
        "type": "number",
        "required": False,
    },
    {
        "name": "culturalNotes",
        "description": "Any cultural context or notes about the translation",
        "type": "string",
        "required": False,
    },
]

SIMPLE_FIELD_NAMES = ("sourceLang", "targetLang", "translatedText")


def _build_schema(fields: List[OutputFieldSchema], description: str) -> Dict[str, Any]:
    return {
        "name": TRANSLATE_FUNCTION_NAME,
        "description": description,
        "parameters": {
            "type": "object",
            "properties": {
                f["name"]: {"type": f["type"], "description": f["description"]}
                for f in fields
            },
            "required": [f["name"] for f in fields if f["required"]],
        },
    }


def get_function_schema() -> Dict[str, Any]:
    """Get the full ``translate_text`` function declaration."""
    return _build_schema(
        TRANSLATE_TEXT_FIELDS,
        "Translate text from one language to another with structured output",
    )


def get_simple_function_schema() -> Dict[str, Any]:
    """Get a reduced declaration with only the language and text fields."""
    fields = [f for f in TRANSLATE_TEXT_FIELDS if f["name"] in SIMPLE_FIELD_NAMES]
    return _build_schema(fields, "Translate text from one language to another")


def to_tool(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a function declaration in the OpenAI tool format."""
    return {"type": "function", "function": schema}


def validate_function_args(args: Optional[Mapping[str, Any]]) -> bool:
    """Check that a function call carries the required fields.

    Args:
        args: Decoded function call arguments

    Returns:
        True if sourceLang, targetLang and translatedText are non-empty strings
    """
    if not args:
        return False
    return all(
        isinstance(args.get(field), str) and args.get(field).strip()
        for field in REQUIRED_CALL_FIELDS
    )
