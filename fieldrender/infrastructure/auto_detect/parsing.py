"""String parsing helpers shared by detection and the built-in renderers.

Spreadsheet cells cannot hold native arrays or booleans, so both arrive as
strings. Parsers here are total: they never raise for string input.
"""

import json
from typing import Any, List

from fieldrender.core.logging import logger

BOOLEAN_STRINGS = frozenset({"true", "false", "yes", "no", "1", "0"})
TRUTHY_STRINGS = frozenset({"true", "yes", "1"})


def stringify_value(value: Any) -> str:
    """Convert a cell value to its display string.

    Integral floats drop the fractional part (3.0 -> "3") since sheets hand
    numbers over without a distinction between ints and floats. Booleans and
    None use their JSON spelling.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(item) for item in value)
    return str(value)


def split_comma_list(value: str) -> List[str]:
    """Split on commas, trimming items and dropping empty ones."""
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_json_list(value: str):
    parsed = json.loads(value)
    if isinstance(parsed, list):
        return [stringify_value(item).strip() for item in parsed]
    return None


def parse_array_string(value: str) -> List[str]:
    """Parse a string-encoded array into a list of strings.

    Handles formats:
        - ["item1", "item2"]  (JSON)
        - ['item1', 'item2']  (single-quoted, as typed into sheets)
        - item1, item2, item3 (comma-separated)

    Bracketed input that is not valid JSON even after swapping single for
    double quotes (or nested too deeply to decode) falls back to comma
    splitting.

    Args:
        value: String to parse

    Returns:
        List of item strings
    """
    trimmed = str(value).strip()

    if trimmed.startswith("[") and trimmed.endswith("]"):
        try:
            items = _load_json_list(trimmed)
            if items is not None:
                return items
        except (ValueError, RecursionError):
            try:
                items = _load_json_list(trimmed.replace("'", '"'))
                if items is not None:
                    return items
            except (ValueError, RecursionError):
                logger.debug("array_parse_fallback", tier="comma_split", value=trimmed[:100])

    return split_comma_list(trimmed)


def is_boolean_string(value: str) -> bool:
    """Check if a string is one of true/false/yes/no/1/0 (case-insensitive)."""
    return str(value).strip().lower() in BOOLEAN_STRINGS


def parse_boolean_string(value: str) -> bool:
    """Convert a boolean-like string to a bool.

    Only "true", "yes" and "1" are truthy. Anything else, including garbage
    and the empty string, is False.
    """
    return str(value).strip().lower() in TRUTHY_STRINGS
