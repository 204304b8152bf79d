"""Field renderers.

- builtins: text, url, email, phone, array and boolean renderers
- registry: resolves which renderer a field uses
- html: serializes presentations to markup
"""

from fieldrender.renderers.builtins import (
    array_renderer,
    boolean_renderer,
    builtin_renderers,
    email_renderer,
    format_phone_for_tel,
    make_url_renderer,
    normalize_url,
    phone_renderer,
    text_renderer,
    url_renderer,
)
from fieldrender.renderers.html import to_html
from fieldrender.renderers.registry import (
    BuiltinRenderer,
    CustomRenderer,
    FieldRendererRegistry,
    create_field_renderer_registry,
    to_config_value,
)

__all__ = [
    "text_renderer",
    "url_renderer",
    "make_url_renderer",
    "normalize_url",
    "email_renderer",
    "phone_renderer",
    "format_phone_for_tel",
    "array_renderer",
    "boolean_renderer",
    "builtin_renderers",
    "to_html",
    "BuiltinRenderer",
    "CustomRenderer",
    "FieldRendererRegistry",
    "create_field_renderer_registry",
    "to_config_value",
]
