"""FastAPI application factory for the render service."""

from typing import Mapping, Optional

from fastapi import FastAPI

from fieldrender import __version__
from fieldrender.api.dependencies import RegistryDefaults
from fieldrender.api.middleware import request_id_middleware
from fieldrender.api.routes import render, system
from fieldrender.config import config


def create_app(
    renderers: Optional[Mapping[str, str]] = None,
    auto_detect: Optional[bool] = None,
) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability.

    Args:
        renderers: Service-wide field name -> renderer type, layered over
            FIELD_RENDER_RENDERERS
        auto_detect: Overrides FIELD_RENDER_AUTO_DETECT when not None
    """
    app = FastAPI(
        title="field-renderers",
        description=(
            "Renders spreadsheet fields for map and table widgets: detects URLs, "
            "emails, phone numbers, lists and yes/no flags, and applies explicit "
            "per-field renderer configuration."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware
    app.middleware("http")(request_id_middleware)

    # Register routes
    app.include_router(system.router)
    app.include_router(render.router)

    default_renderers = dict(config.renderers())
    default_renderers.update(renderers or {})

    app.state.registry_defaults = RegistryDefaults(
        renderers=default_renderers,
        auto_detect=config.auto_detect() if auto_detect is None else auto_detect,
        url_display=config.url_display(),
    )

    return app
