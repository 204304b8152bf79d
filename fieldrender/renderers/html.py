"""HTML serialization for presentations.

Turns Presentation descriptors into escaped markup for hosts that render
server-side (popups, table cells, static pages).
"""

import html
from typing import Any

from fieldrender.infrastructure.auto_detect.parsing import stringify_value
from fieldrender.models.renderers import Presentation

LINK_CLASS = "field-link"
LIST_CLASS = "field-list"
FLAG_CLASS = "field-flag"


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def to_html(presentation: Any) -> str:
    """Serialize a presentation to an HTML fragment.

    Values that are not Presentation instances (custom renderer output) are
    escaped and wrapped as text.

    Args:
        presentation: Presentation or any custom renderer result

    Returns:
        HTML fragment string
    """
    if not isinstance(presentation, Presentation):
        return f"<span>{html.escape(stringify_value(presentation))}</span>"

    if presentation.kind == "link":
        attrs = [f'href="{_attr(presentation.href or "")}"', f'class="{LINK_CLASS}"']
        if presentation.target:
            attrs.append(f'target="{_attr(presentation.target)}"')
        if presentation.rel:
            attrs.append(f'rel="{_attr(presentation.rel)}"')
        return f"<a {' '.join(attrs)}>{html.escape(presentation.text)}</a>"

    if presentation.kind == "list":
        items = "".join(f"<li>{html.escape(item)}</li>" for item in presentation.items)
        return f'<ul class="{LIST_CLASS}">{items}</ul>'

    if presentation.kind == "flag":
        tone = presentation.tone or ("positive" if presentation.state else "muted")
        return (
            f'<span class="{FLAG_CLASS} {FLAG_CLASS}--{tone}">'
            f"{html.escape(presentation.text)}</span>"
        )

    return f"<span>{html.escape(presentation.text)}</span>"
