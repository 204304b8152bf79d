"""Middleware for the render service."""

from fieldrender.api.middleware.request_id import request_id_middleware

__all__ = ["request_id_middleware"]
