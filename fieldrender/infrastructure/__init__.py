"""Infrastructure modules for the field renderer package.

- Auto-Detection: value-based type detection, field-name mappings and the
  string parsing helpers both share
"""

from fieldrender.infrastructure.auto_detect import (
    ARRAY_CONFIDENCE,
    BOOLEAN_CONFIDENCE,
    BOOLEAN_STRING_CONFIDENCE,
    EMAIL_CONFIDENCE,
    PHONE_CONFIDENCE,
    STANDARD_FIELD_MAPPINGS,
    URL_CONFIDENCE,
    ValuePattern,
    detect_field_type,
    get_standard_field_renderer,
    normalize_standard_field_name,
    parse_array_string,
    parse_boolean_string,
    stringify_value,
)

__all__ = [
    "ValuePattern",
    "detect_field_type",
    "URL_CONFIDENCE",
    "EMAIL_CONFIDENCE",
    "ARRAY_CONFIDENCE",
    "PHONE_CONFIDENCE",
    "BOOLEAN_CONFIDENCE",
    "BOOLEAN_STRING_CONFIDENCE",
    "STANDARD_FIELD_MAPPINGS",
    "get_standard_field_renderer",
    "normalize_standard_field_name",
    "parse_array_string",
    "parse_boolean_string",
    "stringify_value",
]
