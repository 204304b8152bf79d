"""Configuration management for the field renderer package.

Centralizes all environment variable access for better testability.
"""

import json
import os
from typing import Dict, Optional


class Config:
    """Configuration loaded from environment variables."""

    # Rendering defaults
    @staticmethod
    def auto_detect() -> bool:
        """Get the default auto-detect flag (FIELD_RENDER_AUTO_DETECT, default true)."""
        from fieldrender.infrastructure.auto_detect.parsing import parse_boolean_string

        raw = os.environ.get("FIELD_RENDER_AUTO_DETECT")
        if raw is None or not raw.strip():
            return True
        return parse_boolean_string(raw)

    @staticmethod
    def renderers() -> Dict[str, str]:
        """Get service-wide explicit renderers from FIELD_RENDER_RENDERERS (JSON object)."""
        raw = os.environ.get("FIELD_RENDER_RENDERERS")
        if not raw:
            return {}

        from fieldrender.core.logging import logger

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("renderers_config_invalid", reason="invalid JSON", error=str(e))
            return {}

        if not isinstance(parsed, dict):
            logger.warning("renderers_config_invalid", reason="expected a JSON object")
            return {}

        return {str(key): str(value) for key, value in parsed.items()}

    @staticmethod
    def url_display() -> str:
        """Get URL link text convention: 'field_name' (default) or 'url'."""
        value = os.environ.get("FIELD_RENDER_URL_DISPLAY", "field_name").strip().lower()
        return value if value in ("field_name", "url") else "field_name"

    # Logging
    @staticmethod
    def log_level() -> str:
        """Get log level name from environment."""
        return os.environ.get("FIELD_RENDER_LOG_LEVEL", "INFO").upper()

    # Service metadata
    @staticmethod
    def service_name() -> str:
        """Get service name reported by /health."""
        return os.environ.get("FIELD_RENDER_SERVICE_NAME", "field-renderers")

    @staticmethod
    def modal_app_name() -> Optional[str]:
        """Get Modal app name override."""
        return os.environ.get("FIELD_RENDER_MODAL_APP")


# Singleton instance for easy access
config = Config()
