"""Request models for the render service."""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

FieldValue = Union[bool, int, float, str, List[Any]]


class BaseRegistryModel(BaseModel):
    """Base model for endpoints that build a per-request registry."""

    renderers: Dict[str, str] = Field(
        default_factory=dict,
        description="Field name -> built-in renderer type (text, url, email, phone, array, boolean)",
    )
    auto_detect: Optional[bool] = Field(
        None,
        description="Enable value-based detection (defaults to the service setting)",
    )


class DetectRequest(BaseModel):
    """Request for /detect endpoint."""

    value: FieldValue


class ResolveRequest(BaseRegistryModel):
    """Request for /resolve endpoint."""

    field_name: str = Field(..., description="Spreadsheet column name")
    value: FieldValue


class RenderRequest(BaseRegistryModel):
    """Request for /render endpoint."""

    field_name: str = Field(..., description="Spreadsheet column name")
    value: FieldValue
    context: Dict[str, Any] = Field(
        default_factory=dict,
        description="Full record, passed through to renderers",
    )
    format: Literal["json", "html"] = "json"


class RenderRecordRequest(BaseRegistryModel):
    """Request for /render/record endpoint."""

    fields: Dict[str, FieldValue] = Field(
        ...,
        description="Custom fields of one record, in display order",
    )
    format: Literal["json", "html"] = "json"
