"""Modal deployment wrapper for the render service.

Usage:
    Development: modal serve fieldrender/modal_app.py
    Production: modal deploy fieldrender/modal_app.py
"""

import modal

from fieldrender.api import create_app
from fieldrender.config import config

app = modal.App(config.modal_app_name() or "field-renderers")

image = (
    modal.Image.debian_slim(python_version="3.12")
    .pip_install(
        # Core FastAPI
        "fastapi>=0.100.0",
        "pydantic>=2.0.0",
        "uvicorn>=0.23.0",
        # Logging
        "structlog>=24.4.0",
    )
    .add_local_python_source("fieldrender")
)


@app.function(
    image=image,
    timeout=30,
    container_idle_timeout=120,
    concurrency_limit=10,
)
@modal.asgi_app()
def api():
    """Render service FastAPI application.

    Returns:
        FastAPI app instance
    """
    return create_app()
