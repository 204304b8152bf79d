"""Pydantic and value models.

- renderers: renderer types, detection results and presentations
- requests: render service request and response bodies
"""

from fieldrender.models.renderers import (
    DetectionResult,
    Presentation,
    RenderedField,
    RendererFunction,
    RendererType,
    ScalarValue,
)
from fieldrender.models.requests import (
    DetectRequest,
    RenderRecordRequest,
    RenderRequest,
    ResolveRequest,
)

__all__ = [
    "DetectionResult",
    "Presentation",
    "RenderedField",
    "RendererFunction",
    "RendererType",
    "ScalarValue",
    "DetectRequest",
    "ResolveRequest",
    "RenderRequest",
    "RenderRecordRequest",
]
