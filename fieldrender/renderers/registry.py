"""Field renderer registry.

Decides how each field of a record is presented. Resolution order:
1. Explicit configuration (field name match)
2. Standard field mapping (website, email, phone, ...)
3. Auto-detection from the value (if enabled)
4. Text renderer

Nothing is cached between calls: every lookup re-runs the chain, so
register/unregister/set_auto_detect take effect on the next call.

Instances are not safe for concurrent mutation. Build one registry per
widget (or per request) rather than sharing a module-level instance.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from fieldrender.core.logging import logger
from fieldrender.infrastructure.auto_detect import detect_field_type, get_standard_field_renderer
from fieldrender.models.renderers import RendererFunction, RendererType, ScalarValue
from fieldrender.renderers.builtins import URL_DISPLAY_FIELD_NAME, builtin_renderers


RENDERER_ARG_COUNT = 3


def positional_arg_count(fn: RendererFunction) -> int:
    """Count how many of (value, field_name, context) a renderer accepts positionally."""
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return RENDERER_ARG_COUNT

    count = 0
    for parameter in parameters:
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return RENDERER_ARG_COUNT
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return min(count, RENDERER_ARG_COUNT)


@dataclass(frozen=True)
class BuiltinRenderer:
    """Explicit configuration naming a built-in renderer type."""

    type_name: str


@dataclass(frozen=True)
class CustomRenderer:
    """Explicit configuration with a caller-supplied renderer function.

    The function may accept any prefix of (value, field_name, context), so
    `lambda value: ...` works as well as the full signature. The accepted
    count is read once, when the renderer is wrapped.
    """

    fn: RendererFunction
    arg_count: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "arg_count", positional_arg_count(self.fn))

    def __call__(self, value: ScalarValue, field_name: str, context: Mapping[str, Any]) -> Any:
        return self.fn(*(value, field_name, context)[: self.arg_count])


RendererConfigValue = Union[BuiltinRenderer, CustomRenderer]
RendererConfigInput = Union[RendererConfigValue, RendererType, str, RendererFunction]


def to_config_value(config: RendererConfigInput) -> RendererConfigValue:
    """Wrap a raw configuration value (tag string, RendererType or callable).

    Raises:
        TypeError: If config is none of the accepted kinds
    """
    if isinstance(config, (BuiltinRenderer, CustomRenderer)):
        return config
    if isinstance(config, RendererType):
        return BuiltinRenderer(config.value)
    if isinstance(config, str):
        return BuiltinRenderer(config)
    if callable(config):
        return CustomRenderer(config)
    raise TypeError(
        f"Renderer config must be a renderer type name or a callable, got {type(config).__name__}"
    )


def normalize_field_name(field_name: str) -> str:
    """Normalize a field name for explicit configuration lookups."""
    return field_name.strip().lower()


class FieldRendererRegistry:
    """Registry mapping field names and values to renderers."""

    def __init__(
        self,
        renderers: Optional[Mapping[str, RendererConfigInput]] = None,
        auto_detect: bool = True,
        url_display: str = URL_DISPLAY_FIELD_NAME,
    ):
        """Initialize the registry.

        Args:
            renderers: Field name -> built-in type name, RendererType or
                custom renderer function
            auto_detect: Detect renderer types from values when no explicit
                or standard mapping applies
            url_display: Link text convention for URLs ("field_name" or "url")
        """
        self._explicit: Dict[str, RendererConfigValue] = {}
        self._auto_detect = auto_detect
        self._builtins = builtin_renderers(url_display)

        for field_name, config in (renderers or {}).items():
            self.register_renderer(field_name, config)

    def _builtin(self, config: BuiltinRenderer) -> Tuple[RendererType, RendererFunction]:
        renderer_type = RendererType.from_tag(config.type_name)
        if renderer_type is None:
            logger.warning(
                "unknown_renderer_type",
                renderer_type=config.type_name,
                fallback=RendererType.TEXT.value,
            )
            renderer_type = RendererType.TEXT
        return renderer_type, self._builtins[renderer_type]

    def _resolve(
        self, field_name: str, value: ScalarValue
    ) -> Tuple[RendererType, RendererFunction]:
        # 1. Explicit configuration
        explicit = self._explicit.get(normalize_field_name(field_name))
        if isinstance(explicit, CustomRenderer):
            return RendererType.TEXT, explicit
        if isinstance(explicit, BuiltinRenderer):
            return self._builtin(explicit)

        # 2. Standard field mappings
        standard_type = get_standard_field_renderer(field_name)
        if standard_type is not None:
            return standard_type, self._builtins[standard_type]

        # 3. Auto-detection
        if self._auto_detect:
            detected = detect_field_type(value)
            if detected is not None:
                return detected.type, self._builtins[detected.type]

        # 4. Default
        return RendererType.TEXT, self._builtins[RendererType.TEXT]

    def resolve_renderer_function(self, field_name: str, value: ScalarValue) -> RendererFunction:
        """Get the renderer function for a field.

        Args:
            field_name: The name/key of the field
            value: The field value

        Returns:
            Built-in renderer, or the CustomRenderer wrapping a configured
            function; both are called with (value, field_name, context)
        """
        return self._resolve(field_name, value)[1]

    def resolve_renderer_type(self, field_name: str, value: ScalarValue) -> RendererType:
        """Get the renderer type that will be used for a field.

        Useful for layout decisions such as "is this a link-only field".
        Fields with a custom renderer function report TEXT.
        """
        return self._resolve(field_name, value)[0]

    get_renderer = resolve_renderer_function
    get_renderer_type = resolve_renderer_type

    def render(
        self,
        field_name: str,
        value: ScalarValue,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Render a field value with the resolved renderer.

        Args:
            field_name: The name/key of the field
            value: The field value
            context: Full record, passed through to the renderer

        Returns:
            Presentation for built-in renderers, whatever a custom renderer returns
        """
        renderer = self.resolve_renderer_function(field_name, value)
        return renderer(value, field_name, context if context is not None else {})

    def has_explicit_renderer(self, field_name: str) -> bool:
        """Check if a field has an explicit renderer configured."""
        return normalize_field_name(field_name) in self._explicit

    def register_renderer(self, field_name: str, config: RendererConfigInput) -> None:
        """Register (or replace) the renderer for a field name."""
        self._explicit[normalize_field_name(field_name)] = to_config_value(config)

    def unregister_renderer(self, field_name: str) -> None:
        """Remove a registered renderer. Unknown field names are ignored."""
        self._explicit.pop(normalize_field_name(field_name), None)

    def get_registered_fields(self) -> List[str]:
        """Get all explicitly registered (normalized) field names."""
        return list(self._explicit.keys())

    def is_auto_detect_enabled(self) -> bool:
        """Check if auto-detection is enabled."""
        return self._auto_detect

    def set_auto_detect(self, enabled: bool) -> None:
        """Enable or disable auto-detection."""
        self._auto_detect = enabled


def create_field_renderer_registry(
    renderers: Optional[Mapping[str, RendererConfigInput]] = None,
    auto_detect: bool = True,
    url_display: str = URL_DISPLAY_FIELD_NAME,
) -> FieldRendererRegistry:
    """Create a new FieldRendererRegistry.

    Example:
        >>> registry = create_field_renderer_registry({"products": "array"})
        >>> registry.resolve_renderer_type("Products", "a, b")
        <RendererType.ARRAY: 'array'>
    """
    return FieldRendererRegistry(
        renderers=renderers, auto_detect=auto_detect, url_display=url_display
    )
