"""Unit tests for FieldRendererRegistry resolution and rendering."""

import pytest
import structlog
from structlog.testing import capture_logs

import fieldrender.renderers.registry as registry_module
from fieldrender.models import Presentation, RendererType
from fieldrender.renderers import (
    BuiltinRenderer,
    CustomRenderer,
    FieldRendererRegistry,
    create_field_renderer_registry,
    text_renderer,
)


def stars(value, field_name, context):
    return "★" * int(value)


class TestResolutionOrder:
    """Test the explicit > standard > detection > text priority chain."""

    def test_explicit_overrides_detection(self):
        """Test explicit tag wins regardless of value."""
        registry = FieldRendererRegistry(renderers={"status": "url"})

        assert registry.resolve_renderer_type("status", "hello") == RendererType.URL

    def test_explicit_overrides_standard_mapping(self):
        """Test explicit tag beats the field name convention."""
        registry = FieldRendererRegistry(renderers={"website": "text"})

        assert registry.resolve_renderer_type("Website", "https://example.com") == RendererType.TEXT

    def test_explicit_lookup_is_case_insensitive(self):
        """Test keys and lookups are normalized."""
        registry = FieldRendererRegistry(renderers={"Products": "array"})

        assert registry.resolve_renderer_type(" PRODUCTS ", "x") == RendererType.ARRAY
        assert registry.get_registered_fields() == ["products"]

    def test_standard_mapping_ignores_value(self):
        """Test name-based mapping beats value-based detection."""
        registry = FieldRendererRegistry()

        assert registry.resolve_renderer_type("Website", "not a url at all") == RendererType.URL

    def test_detection(self):
        """Test detection applies to unmapped fields."""
        registry = FieldRendererRegistry()

        assert registry.resolve_renderer_type("contact", "user@example.com") == RendererType.EMAIL
        assert registry.resolve_renderer_type("colors", "Red, Blue, Green") == RendererType.ARRAY

    def test_detection_disabled(self):
        """Test auto_detect=False skips detection but keeps standard mapping."""
        registry = FieldRendererRegistry(auto_detect=False)

        assert registry.resolve_renderer_type("contact", "user@example.com") == RendererType.TEXT
        assert registry.resolve_renderer_type("email", "user@example.com") == RendererType.EMAIL

    def test_fallback_to_text(self):
        """Test undetectable values render as text."""
        registry = FieldRendererRegistry()

        assert registry.resolve_renderer_type("notes", "Open daily") == RendererType.TEXT
        assert registry.resolve_renderer_type("count", "123,456") == RendererType.TEXT


class TestExplicitConfiguration:
    """Test explicit configuration values."""

    def test_custom_function_type_is_text(self):
        """Test custom functions report TEXT as nominal type."""
        registry = FieldRendererRegistry(renderers={"rating": stars})

        assert registry.resolve_renderer_type("rating", "https://example.com") == RendererType.TEXT
        assert registry.resolve_renderer_function("rating", 3).fn is stars

    def test_unknown_tag_falls_back_to_text(self):
        """Test unknown tags degrade to text instead of raising."""
        registry = FieldRendererRegistry(renderers={"status": "badge"})

        assert registry.resolve_renderer_type("status", "x") == RendererType.TEXT
        assert registry.render("status", "open") == Presentation(kind="text", text="open")

    def test_unknown_tag_logs_warning(self, monkeypatch):
        """Test unknown tags emit one diagnostic naming the tag and fallback."""
        registry = FieldRendererRegistry(renderers={"status": "badge"})

        with capture_logs() as cap_logs:
            monkeypatch.setattr(registry_module, "logger", structlog.get_logger())
            registry.render("status", "open")

        warnings = [log for log in cap_logs if log["event"] == "unknown_renderer_type"]
        assert warnings == [
            {
                "event": "unknown_renderer_type",
                "log_level": "warning",
                "renderer_type": "badge",
                "fallback": "text",
            }
        ]

    @pytest.mark.parametrize("tag", ["URL", "url ", "Phone"])
    def test_tags_match_exactly(self, tag):
        """Test tags that differ in case or whitespace are unknown."""
        registry = FieldRendererRegistry(renderers={"status": tag})

        assert registry.resolve_renderer_type("status", "hello") == RendererType.TEXT

    def test_known_tag_logs_nothing(self, monkeypatch):
        """Test built-in tags resolve without a diagnostic."""
        registry = FieldRendererRegistry(renderers={"status": "url"})

        with capture_logs() as cap_logs:
            monkeypatch.setattr(registry_module, "logger", structlog.get_logger())
            registry.render("status", "hello")

        assert [log for log in cap_logs if log["event"] == "unknown_renderer_type"] == []

    def test_renderer_type_and_wrappers_accepted(self):
        """Test RendererType members and tagged wrappers are valid config."""
        registry = FieldRendererRegistry(
            renderers={
                "a": RendererType.PHONE,
                "b": BuiltinRenderer("boolean"),
                "c": CustomRenderer(stars),
            }
        )

        assert registry.resolve_renderer_type("a", "x") == RendererType.PHONE
        assert registry.resolve_renderer_type("b", "x") == RendererType.BOOLEAN
        assert registry.render("c", 2) == "★★"

    def test_invalid_config_raises(self):
        """Test config that is neither tag nor callable is rejected."""
        with pytest.raises(TypeError, match="renderer type name or a callable"):
            FieldRendererRegistry(renderers={"a": 42})


class TestMutation:
    """Test register/unregister/set_auto_detect take effect immediately."""

    def test_register_and_unregister(self):
        """Test registration overrides and removal restores the chain."""
        registry = create_field_renderer_registry()
        assert registry.resolve_renderer_type("notes", "a, b") == RendererType.ARRAY

        registry.register_renderer("Notes", "text")
        assert registry.has_explicit_renderer("NOTES")
        assert registry.resolve_renderer_type("notes", "a, b") == RendererType.TEXT

        registry.unregister_renderer("notes")
        assert not registry.has_explicit_renderer("notes")
        assert registry.resolve_renderer_type("notes", "a, b") == RendererType.ARRAY

    def test_unregister_missing_is_noop(self):
        """Test removing an unknown field does nothing."""
        registry = FieldRendererRegistry()

        registry.unregister_renderer("missing")

        assert registry.get_registered_fields() == []

    def test_set_auto_detect(self):
        """Test toggling detection."""
        registry = FieldRendererRegistry()
        assert registry.is_auto_detect_enabled() is True

        registry.set_auto_detect(False)

        assert registry.is_auto_detect_enabled() is False
        assert registry.resolve_renderer_type("tags", "a, b") == RendererType.TEXT

    def test_instances_are_independent(self):
        """Test two registries never share configuration."""
        first = FieldRendererRegistry()
        second = FieldRendererRegistry()

        first.register_renderer("status", "url")

        assert second.resolve_renderer_type("status", "hello") == RendererType.TEXT


class TestRender:
    """Test rendering through the registry."""

    def test_end_to_end(self):
        """Test custom, phone and text paths in one registry."""
        registry = FieldRendererRegistry(renderers={"rating": stars}, auto_detect=True)

        assert registry.render("rating", 3, {}) == "★★★"

        phone = registry.render("contact_phone", "(555) 123-4567", {})
        assert phone.kind == "link"
        assert phone.href == "tel:5551234567"
        assert phone.text == "(555) 123-4567"

        assert registry.render("notes", "Open daily", {}) == Presentation(kind="text", text="Open daily")

    def test_single_argument_custom_renderer(self):
        """Test custom renderers may take only the value."""
        registry = FieldRendererRegistry(renderers={"rating": lambda v: "★" * int(v)}, auto_detect=True)

        assert registry.render("rating", 3, {}) == "★★★"

    def test_two_argument_custom_renderer(self):
        """Test custom renderers may take value and field name."""
        registry = FieldRendererRegistry(renderers={"rating": lambda v, name: f"{name}={v}"})

        assert registry.render("Rating", 4, {"other": 1}) == "Rating=4"

    def test_varargs_custom_renderer(self):
        """Test *args renderers receive all three arguments."""
        registry = FieldRendererRegistry(renderers={"rating": lambda *args: args})

        assert registry.render("rating", 5, {"a": 1}) == (5, "rating", {"a": 1})

    def test_custom_renderer_arg_count(self):
        """Test the accepted argument count is read at registration."""
        assert CustomRenderer(lambda v: v).arg_count == 1
        assert CustomRenderer(stars).arg_count == 3
        assert CustomRenderer(lambda v, f, c, extra=None: v).arg_count == 3

    def test_deeply_nested_array_does_not_raise(self):
        """Test bracket nesting too deep for JSON falls back to comma split."""
        registry = FieldRendererRegistry()
        nested = "[" * 100000 + "]" * 100000

        result = registry.render("tags", "['x', " + nested + ", 'y']", {})

        assert result.kind == "list"
        assert result.items == ["['x'", nested, "'y']"]

    def test_idempotent(self):
        """Test identical calls give identical output."""
        registry = FieldRendererRegistry()

        first = registry.render("tags", "['a', 'b']", {})
        second = registry.render("tags", "['a', 'b']", {})

        assert first == second

    def test_context_passed_to_custom_renderer(self):
        """Test custom renderers receive field name and the record."""
        seen = {}

        def capture(value, field_name, context):
            seen.update(value=value, field_name=field_name, context=context)
            return "ok"

        registry = FieldRendererRegistry(renderers={"status": capture})
        record = {"status": "open", "name": "Depot"}

        registry.render("Status", "open", record)

        assert seen == {"value": "open", "field_name": "Status", "context": record}

    def test_default_context_is_empty_dict(self):
        """Test missing context becomes an empty record."""
        registry = FieldRendererRegistry(renderers={"x": lambda v, f, c: c})

        assert registry.render("x", 1) == {}

    def test_url_display_option(self):
        """Test registries can show the URL as link text."""
        registry = FieldRendererRegistry(url_display="url")

        assert registry.render("website", "https://example.com", {}).text == "example.com"

    def test_get_renderer_aliases(self):
        """Test get_renderer aliases resolve_renderer_function."""
        registry = FieldRendererRegistry(auto_detect=False)

        assert registry.get_renderer("notes", "x") is text_renderer
        assert registry.get_renderer_type("notes", "x") == RendererType.TEXT
