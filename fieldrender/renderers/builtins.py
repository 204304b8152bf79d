"""Built-in field renderers.

Each renderer maps (value, field_name, context) to a Presentation. The
context record is accepted for signature parity with custom renderers and
is never inspected here.
"""

import re
from typing import Any, Dict, List, Mapping, Optional

from fieldrender.infrastructure.auto_detect.parsing import (
    parse_array_string,
    parse_boolean_string,
    stringify_value,
)
from fieldrender.models.renderers import Presentation, RendererFunction, RendererType, ScalarValue

URL_PROTOCOL_RE = re.compile(r"^https?://", re.IGNORECASE)
NON_DIGIT_RE = re.compile(r"[^0-9]")

URL_DISPLAY_FIELD_NAME = "field_name"
URL_DISPLAY_URL = "url"
URL_DISPLAY_MAX_LENGTH = 40

EXTERNAL_LINK_TARGET = "_blank"
EXTERNAL_LINK_REL = "noopener noreferrer"
EMPTY_MARKER = "-"

Context = Optional[Mapping[str, Any]]


def text_renderer(
    value: ScalarValue, field_name: str = "", context: Context = None
) -> Presentation:
    """Render a value as plain text. Booleans read Yes/No."""
    if isinstance(value, bool):
        return Presentation(kind="text", text="Yes" if value else "No")
    return Presentation(kind="text", text=stringify_value(value))


def normalize_url(url: str) -> str:
    """Prepend https:// unless the URL already has an http(s) scheme."""
    trimmed = url.strip()
    if URL_PROTOCOL_RE.match(trimmed):
        return trimmed
    return f"https://{trimmed}"


def display_url(url: str, max_length: int = URL_DISPLAY_MAX_LENGTH) -> str:
    """Shorten a URL for link text: drop the scheme and trailing slash, truncate."""
    cleaned = URL_PROTOCOL_RE.sub("", url.strip()).rstrip("/")
    if len(cleaned) > max_length:
        return cleaned[: max_length - 1] + "…"
    return cleaned


def make_url_renderer(display: str = URL_DISPLAY_FIELD_NAME) -> RendererFunction:
    """Build a URL renderer.

    Args:
        display: Link text convention. "field_name" shows the column name
            (falling back to the URL when the name is blank); "url" shows
            the shortened URL.

    Returns:
        Renderer function producing external links
    """
    show_url = display == URL_DISPLAY_URL

    def url_renderer(
        value: ScalarValue, field_name: str = "", context: Context = None
    ) -> Presentation:
        href = normalize_url(stringify_value(value))
        text = field_name.strip()
        if show_url or not text:
            text = display_url(href)
        return Presentation(
            kind="link",
            text=text,
            href=href,
            scheme="http" if href.lower().startswith("http://") else "https",
            target=EXTERNAL_LINK_TARGET,
            rel=EXTERNAL_LINK_REL,
        )

    return url_renderer


url_renderer = make_url_renderer()


def email_renderer(
    value: ScalarValue, field_name: str = "", context: Context = None
) -> Presentation:
    """Render an email address as a mailto: link."""
    email = stringify_value(value).strip()
    return Presentation(kind="link", text=email, href=f"mailto:{email}", scheme="mailto")


def format_phone_for_tel(phone: str) -> str:
    """Strip everything but digits, keeping a leading + if present."""
    digits = NON_DIGIT_RE.sub("", phone)
    return f"+{digits}" if phone.startswith("+") else digits


def phone_renderer(
    value: ScalarValue, field_name: str = "", context: Context = None
) -> Presentation:
    """Render a phone number as a tel: link, keeping the original text."""
    phone = stringify_value(value).strip()
    return Presentation(
        kind="link", text=phone, href=f"tel:{format_phone_for_tel(phone)}", scheme="tel"
    )


def get_array_items(value: ScalarValue) -> List[str]:
    """Get list items from a native list or a string-encoded one."""
    if isinstance(value, (list, tuple)):
        items = [stringify_value(item).strip() for item in value]
        return [item for item in items if item]

    text = stringify_value(value).strip()
    if not text:
        return []
    return parse_array_string(text)


def array_renderer(
    value: ScalarValue, field_name: str = "", context: Context = None
) -> Presentation:
    """Render a list: a placeholder when empty, inline for one item, a list otherwise."""
    items = get_array_items(value)

    if not items:
        return Presentation(kind="empty", text=EMPTY_MARKER)

    if len(items) == 1:
        return Presentation(kind="text", text=items[0])

    return Presentation(kind="list", items=items)


def get_boolean_value(value: ScalarValue) -> bool:
    """Coerce a cell value to bool. Numbers are true when non-zero."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return parse_boolean_string(stringify_value(value))


def boolean_renderer(
    value: ScalarValue, field_name: str = "", context: Context = None
) -> Presentation:
    """Render a flag as Yes/No with a distinct tone for each state."""
    state = get_boolean_value(value)
    return Presentation(
        kind="flag",
        text="Yes" if state else "No",
        state=state,
        tone="positive" if state else "muted",
    )


def builtin_renderers(
    url_display: str = URL_DISPLAY_FIELD_NAME,
) -> Dict[RendererType, RendererFunction]:
    """Get the renderer function for every built-in type."""
    return {
        RendererType.TEXT: text_renderer,
        RendererType.URL: make_url_renderer(url_display),
        RendererType.EMAIL: email_renderer,
        RendererType.PHONE: phone_renderer,
        RendererType.ARRAY: array_renderer,
        RendererType.BOOLEAN: boolean_renderer,
    }
