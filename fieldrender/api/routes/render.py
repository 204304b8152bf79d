"""Render routes: detection, resolution and rendering of record fields.

Every request gets its own registry built from the service defaults plus the
request's renderer configuration.
"""

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends

from fieldrender.api.dependencies import RegistryDefaults, build_registry, get_registry_defaults
from fieldrender.core.logging import logger
from fieldrender.infrastructure.auto_detect import detect_field_type
from fieldrender.models.renderers import Presentation, RendererType
from fieldrender.models.requests import (
    DetectRequest,
    RenderRecordRequest,
    RenderRequest,
    ResolveRequest,
)
from fieldrender.renderers import to_html
from fieldrender.utils.fields import render_fields

router = APIRouter(tags=["Rendering"])


def _dump_presentation(presentation: Any) -> Any:
    if isinstance(presentation, Presentation):
        return presentation.model_dump(mode="json")
    return presentation


@router.post("/detect")
async def detect_route(request_data: DetectRequest):
    """Detect the renderer type of a value. Returns type and confidence (null when nothing matched)."""
    detected = detect_field_type(request_data.value)

    if detected is None:
        return {"type": RendererType.TEXT.value, "confidence": None}

    return {"type": detected.type.value, "confidence": detected.confidence}


@router.post("/resolve")
async def resolve_route(
    request_data: ResolveRequest,
    defaults: RegistryDefaults = Depends(get_registry_defaults),
):
    """Resolve which renderer type a field uses without rendering it."""
    registry = build_registry(defaults, request_data)
    renderer_type = registry.resolve_renderer_type(request_data.field_name, request_data.value)

    return {"field_name": request_data.field_name, "renderer_type": renderer_type.value}


@router.post("/render")
async def render_route(
    request_data: RenderRequest,
    defaults: RegistryDefaults = Depends(get_registry_defaults),
):
    """Render one field. Returns renderer type, presentation and optional HTML."""
    registry = build_registry(defaults, request_data)

    renderer_type = registry.resolve_renderer_type(request_data.field_name, request_data.value)
    presentation = registry.render(
        request_data.field_name, request_data.value, request_data.context
    )

    response: Dict[str, Any] = {
        "field_name": request_data.field_name,
        "renderer_type": renderer_type.value,
        "presentation": _dump_presentation(presentation),
    }
    if request_data.format == "html":
        response["html"] = to_html(presentation)

    return response


@router.post("/render/record")
async def render_record_route(
    request_data: RenderRecordRequest,
    defaults: RegistryDefaults = Depends(get_registry_defaults),
):
    """Render every custom field of a record in order."""
    start_time = time.time()
    registry = build_registry(defaults, request_data)

    fields = []
    for rendered in render_fields(registry, request_data.fields):
        entry = rendered.model_dump(mode="json")
        entry["presentation"] = _dump_presentation(rendered.presentation)
        if request_data.format == "html":
            entry["html"] = to_html(rendered.presentation)
        fields.append(entry)

    logger.info(
        "record_rendered",
        field_count=len(fields),
        processing_ms=int((time.time() - start_time) * 1000),
    )

    return {"fields": fields}
