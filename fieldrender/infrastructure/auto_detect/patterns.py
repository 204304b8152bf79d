"""Value patterns for auto-detection.

Each pattern pairs a renderer type with a fixed confidence and a matcher.
Patterns are tried in order and the first match wins, so the order encodes
precedence: URL and email are claimed before the looser array and phone
tests, array is tried before phone so numeric tuples are not read as phone
numbers, and the single-token boolean test goes last.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from fieldrender.infrastructure.auto_detect.parsing import (
    is_boolean_string,
    stringify_value,
)
from fieldrender.models.renderers import DetectionResult, RendererType, ScalarValue

BOOLEAN_CONFIDENCE = 1.0
URL_CONFIDENCE = 0.95
EMAIL_CONFIDENCE = 0.9
ARRAY_CONFIDENCE = 0.85
BOOLEAN_STRING_CONFIDENCE = 0.8
PHONE_CONFIDENCE = 0.7

URL_PROTOCOL_RE = re.compile(r"^https?://", re.IGNORECASE)
URL_WWW_RE = re.compile(r"^www\.", re.IGNORECASE)
# Prefix match: "example.com/path" is a URL too
URL_DOMAIN_RE = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?(\.[a-z]{2,})+", re.IGNORECASE)
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
QUOTED_ARRAY_RE = re.compile(r"\[['\"].*['\"]\]")
COMMA_LIST_RE = re.compile(r"^[^,]+,\s*[^,]+")
NUMERIC_RE = re.compile(r"[0-9]+")
PHONE_CHARS_RE = re.compile(r"[0-9\s\-()+.]+")
DIGIT_RE = re.compile(r"[0-9]")

PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15
PHONE_MIN_DIGIT_RATIO = 0.5


@dataclass(frozen=True)
class ValuePattern:
    """Definition of a value-based renderer pattern."""

    renderer_type: RendererType
    confidence: float
    matcher: Callable[[str], bool]


def is_url(value: str) -> bool:
    """Check if a string looks like a URL.

    Bare domains only count when there is no "@", so emails are left to the
    email pattern.
    """
    if URL_PROTOCOL_RE.match(value) or URL_WWW_RE.match(value):
        return True
    if URL_DOMAIN_RE.match(value):
        return "@" not in value
    return False


def is_email(value: str) -> bool:
    """Check if a string looks like an email address."""
    return EMAIL_RE.fullmatch(value) is not None


def is_array_string(value: str) -> bool:
    """Check if a string encodes a list.

    Either a bracketed list with quoted items, or two or more non-empty
    comma-separated items that are not all plain numbers ("123,456").
    """
    if QUOTED_ARRAY_RE.fullmatch(value):
        return True

    if COMMA_LIST_RE.match(value):
        parts = [part.strip() for part in value.split(",")]
        if len(parts) >= 2 and all(parts):
            return not all(NUMERIC_RE.fullmatch(part) for part in parts)

    return False


def is_phone(value: str) -> bool:
    """Check if a string looks like a phone number.

    7 to 15 digits, at least half the characters digits, and nothing but
    digits, spaces, dashes, parens, dots and plus signs.
    """
    digit_count = len(DIGIT_RE.findall(value))
    if digit_count < PHONE_MIN_DIGITS or digit_count > PHONE_MAX_DIGITS:
        return False

    if digit_count / len(value) < PHONE_MIN_DIGIT_RATIO:
        return False

    return PHONE_CHARS_RE.fullmatch(value) is not None


VALUE_PATTERNS: Tuple[ValuePattern, ...] = (
    ValuePattern(RendererType.URL, URL_CONFIDENCE, is_url),
    ValuePattern(RendererType.EMAIL, EMAIL_CONFIDENCE, is_email),
    ValuePattern(RendererType.ARRAY, ARRAY_CONFIDENCE, is_array_string),
    ValuePattern(RendererType.PHONE, PHONE_CONFIDENCE, is_phone),
    ValuePattern(RendererType.BOOLEAN, BOOLEAN_STRING_CONFIDENCE, is_boolean_string),
)


def detect_field_type(value: ScalarValue) -> Optional[DetectionResult]:
    """Detect the renderer type of a value from its content.

    Args:
        value: Cell value (string, number, boolean or native list)

    Returns:
        DetectionResult of the first matching pattern, or None to use text

    Example:
        >>> detect_field_type("user@example.com")
        DetectionResult(type=<RendererType.EMAIL: 'email'>, confidence=0.9)
    """
    # Native booleans win before any string coercion
    if isinstance(value, bool):
        return DetectionResult(RendererType.BOOLEAN, BOOLEAN_CONFIDENCE)

    if isinstance(value, (list, tuple)):
        if any(stringify_value(item).strip() for item in value):
            return DetectionResult(RendererType.ARRAY, ARRAY_CONFIDENCE)
        return None

    text = stringify_value(value).strip()
    if not text:
        return None

    for pattern in VALUE_PATTERNS:
        if pattern.matcher(text):
            return DetectionResult(pattern.renderer_type, pattern.confidence)

    return None
