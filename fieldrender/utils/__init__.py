"""Utility modules for the field renderer package."""

from fieldrender.utils.fields import fields_match_query, format_field_label, render_fields

__all__ = ["format_field_label", "render_fields", "fields_match_query"]
