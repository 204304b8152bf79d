"""Route modules for the render service."""

from fieldrender.api.routes import render, system

__all__ = ["render", "system"]
