"""Record-level helpers for custom fields.

Custom fields are the free-form columns of a location row that have no
dedicated slot in the widget (rental_price, wheelchairAccessible, ...).
"""

import re
from typing import Any, List, Mapping, Optional

from fieldrender.infrastructure.auto_detect.parsing import stringify_value
from fieldrender.models.renderers import RenderedField, ScalarValue
from fieldrender.renderers.registry import FieldRendererRegistry

_CAMEL_BOUNDARY_RE = re.compile(r"([A-Z])")


def format_field_label(key: str) -> str:
    """Format a field key for display.

    Examples:
        rental_price -> Rental Price
        bike_types_available -> Bike Types Available
        wheelchairAccessible -> Wheelchair Accessible
    """
    spaced = _CAMEL_BOUNDARY_RE.sub(r" \1", key).replace("_", " ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in spaced.split())


def render_fields(
    registry: FieldRendererRegistry,
    fields: Optional[Mapping[str, ScalarValue]],
    context: Optional[Mapping[str, Any]] = None,
) -> List[RenderedField]:
    """Render every custom field of a record, in order.

    Args:
        registry: Registry deciding each field's renderer
        fields: Field name -> value
        context: Record passed to renderers (defaults to fields itself)

    Returns:
        List of RenderedField, empty when there are no fields
    """
    if not fields:
        return []

    record = context if context is not None else fields
    return [
        RenderedField(
            name=name,
            label=format_field_label(name),
            renderer_type=registry.resolve_renderer_type(name, value),
            presentation=registry.render(name, value, record),
        )
        for name, value in fields.items()
    ]


def fields_match_query(fields: Optional[Mapping[str, ScalarValue]], query: str) -> bool:
    """Check if any field value contains the query (case-insensitive).

    An empty query matches every record.
    """
    needle = query.strip().lower()
    if not needle:
        return True
    if not fields:
        return False
    return any(needle in stringify_value(value).lower() for value in fields.values())
