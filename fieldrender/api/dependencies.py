"""FastAPI dependencies for the render service.

Dependency injection functions for route handlers.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from fastapi import Request

from fieldrender.models.requests import BaseRegistryModel
from fieldrender.renderers import FieldRendererRegistry
from fieldrender.renderers.builtins import URL_DISPLAY_FIELD_NAME


@dataclass(frozen=True)
class RegistryDefaults:
    """Service-wide registry settings every request starts from."""

    renderers: Dict[str, str] = field(default_factory=dict)
    auto_detect: bool = True
    url_display: str = URL_DISPLAY_FIELD_NAME


def get_registry_defaults(request: Request) -> RegistryDefaults:
    """Get registry defaults from app state.

    Note:
        Returns stock defaults if registry_defaults is not set in app.state.
        Set via: app.state.registry_defaults = RegistryDefaults(...)
    """
    return getattr(request.app.state, "registry_defaults", RegistryDefaults())


def build_registry(
    defaults: RegistryDefaults, request_data: Optional[BaseRegistryModel] = None
) -> FieldRendererRegistry:
    """Build a fresh registry for one request.

    Request-level renderers override service-wide ones field by field.
    """
    renderers = dict(defaults.renderers)
    auto_detect = defaults.auto_detect

    if request_data is not None:
        renderers.update(request_data.renderers)
        if request_data.auto_detect is not None:
            auto_detect = request_data.auto_detect

    return FieldRendererRegistry(
        renderers=renderers,
        auto_detect=auto_detect,
        url_display=defaults.url_display,
    )
