"""System routes for the render service."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from fieldrender import __version__
from fieldrender.api.dependencies import RegistryDefaults, get_registry_defaults
from fieldrender.config import config
from fieldrender.models.renderers import RendererType

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(defaults: RegistryDefaults = Depends(get_registry_defaults)):
    """Health check. Returns service status, version and registry defaults."""
    return {
        "status": "healthy",
        "service": config.service_name(),
        "version": __version__,
        "auto_detect": defaults.auto_detect,
        "registered_fields": sorted(name.strip().lower() for name in defaults.renderers),
        "renderer_types": [renderer_type.value for renderer_type in RendererType],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
