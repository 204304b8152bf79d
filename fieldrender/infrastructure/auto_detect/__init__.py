"""Auto-detection module.

Detects how a field should be rendered from its value (patterns) or its
name (mappings). Parsing helpers decode the string-encoded arrays and
booleans spreadsheet cells carry.
"""

from fieldrender.infrastructure.auto_detect.mappings import (
    STANDARD_FIELD_MAPPINGS,
    get_standard_field_renderer,
    normalize_standard_field_name,
)
from fieldrender.infrastructure.auto_detect.parsing import (
    is_boolean_string,
    parse_array_string,
    parse_boolean_string,
    split_comma_list,
    stringify_value,
)
from fieldrender.infrastructure.auto_detect.patterns import (
    ARRAY_CONFIDENCE,
    BOOLEAN_CONFIDENCE,
    BOOLEAN_STRING_CONFIDENCE,
    EMAIL_CONFIDENCE,
    PHONE_CONFIDENCE,
    URL_CONFIDENCE,
    VALUE_PATTERNS,
    ValuePattern,
    detect_field_type,
    is_array_string,
    is_email,
    is_phone,
    is_url,
)

__all__ = [
    "ValuePattern",
    "VALUE_PATTERNS",
    "detect_field_type",
    "is_url",
    "is_email",
    "is_array_string",
    "is_phone",
    "URL_CONFIDENCE",
    "EMAIL_CONFIDENCE",
    "ARRAY_CONFIDENCE",
    "PHONE_CONFIDENCE",
    "BOOLEAN_CONFIDENCE",
    "BOOLEAN_STRING_CONFIDENCE",
    "STANDARD_FIELD_MAPPINGS",
    "get_standard_field_renderer",
    "normalize_standard_field_name",
    "is_boolean_string",
    "parse_array_string",
    "parse_boolean_string",
    "split_comma_list",
    "stringify_value",
]
