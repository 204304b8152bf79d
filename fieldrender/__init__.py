"""Field rendering registry for spreadsheet-sourced location data.

Decides how an untyped spreadsheet cell is presented (plain text, link,
mailto, tel, list or yes/no flag) from explicit configuration, field-name
conventions and value-based detection.
"""

from fieldrender.infrastructure.auto_detect import (
    detect_field_type,
    get_standard_field_renderer,
    parse_array_string,
    parse_boolean_string,
)
from fieldrender.models import DetectionResult, Presentation, RenderedField, RendererType
from fieldrender.renderers import (
    BuiltinRenderer,
    CustomRenderer,
    FieldRendererRegistry,
    create_field_renderer_registry,
    to_html,
)

__version__ = "1.0.0"

__all__ = [
    "RendererType",
    "DetectionResult",
    "Presentation",
    "RenderedField",
    "detect_field_type",
    "get_standard_field_renderer",
    "parse_array_string",
    "parse_boolean_string",
    "BuiltinRenderer",
    "CustomRenderer",
    "FieldRendererRegistry",
    "create_field_renderer_registry",
    "to_html",
]
