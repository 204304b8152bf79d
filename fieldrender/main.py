"""ASGI entry point for the field renderer HTTP service.

Exposes the registry over JSON: POST /detect reports the detected type and
confidence of a value, /resolve reports the renderer type a field would use,
/render and /render/record return presentations for one field or a whole
record, and GET /health reports liveness. Service-wide defaults come from the
FIELD_RENDER_* environment variables read by fieldrender.config.Config.

Run locally with: uvicorn fieldrender.main:app --reload
"""

from fieldrender.api import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fieldrender.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
