"""Renderer value types.

RendererType is the closed set of built-in presentations. Presentation is the
structured descriptor every built-in renderer returns.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Literal, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field

# Spreadsheet cells hold strings, numbers or booleans. Native lists are
# accepted where callers already have structured data.
ScalarValue = Union[str, int, float, bool, Sequence[Any]]


class RendererType(str, Enum):
    """Built-in renderer types. TEXT is also the universal fallback."""

    TEXT = "text"
    URL = "url"
    EMAIL = "email"
    PHONE = "phone"
    ARRAY = "array"
    BOOLEAN = "boolean"

    @classmethod
    def from_tag(cls, tag: Any) -> Optional["RendererType"]:
        """Look up a renderer type by exact tag, None if the tag is not built in."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class DetectionResult:
    """Detected renderer type and the fixed confidence of the matching rule."""

    type: RendererType
    confidence: float


class Presentation(BaseModel):
    """Structured output of a built-in renderer."""

    kind: Literal["text", "link", "list", "flag", "empty"]
    text: str = ""
    href: Optional[str] = None
    scheme: Optional[Literal["http", "https", "mailto", "tel"]] = None
    target: Optional[str] = None
    rel: Optional[str] = None
    items: List[str] = Field(default_factory=list)
    state: Optional[bool] = None
    tone: Optional[Literal["positive", "muted"]] = None

    model_config = {"frozen": True}


class RenderedField(BaseModel):
    """One rendered field of a record, ready for layout."""

    name: str
    label: str
    renderer_type: RendererType
    presentation: Any


RendererFunction = Callable[[ScalarValue, str, Mapping[str, Any]], Any]
