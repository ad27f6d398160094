"""
Resource API - Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the JSON contract of the resource endpoints.
How:   FastAPI validates request bodies against the request models, serializes
       responses through the response models, and generates the OpenAPI docs
       from both.
Who:   Used by route handlers and by resource_api.validation.

Body field typing is strict: "42" is not an integer and 1 is not a boolean.
Response keys are camelCase (createdAt, updatedAt), the stored column names;
Python attribute names stay snake_case.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic.alias_generators import to_camel

from resource_api.models.resource import ResourceStatus


NAME_MAX_LENGTH = 256


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ResourceCreate(BaseModel):
    """
    Body of POST /resource.

    Only `name` is required. Optional fields left out are stored as null.
    Unknown keys are ignored.
    """

    name: StrictStr = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[StrictStr] = None
    value1: Optional[StrictStr] = None
    value2: Optional[StrictBool] = None
    value3: Optional[StrictInt] = None
    value4: Optional[StrictFloat] = None


class ResourceUpdate(BaseModel):
    """
    Body of PUT /resource/{id}: a partial patch.

    Which keys were actually sent matters. `model_dump(exclude_unset=True)`
    yields just those, so an absent key leaves the stored value alone while
    an explicit null clears it. `name` may be absent but never null.
    """

    name: Optional[StrictStr] = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[StrictStr] = None
    value1: Optional[StrictStr] = None
    value2: Optional[StrictBool] = None
    value3: Optional[StrictInt] = None
    value4: Optional[StrictFloat] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: Optional[str]) -> str:
        """Rejects an explicit null; an absent name is never validated."""
        if v is None:
            raise ValueError("name must be a non-empty string")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ResourceResponse(BaseModel):
    """Full representation of a record, returned by get/create/update/list."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int = Field(description="Store-assigned identifier")
    name: str
    description: Optional[str] = None
    value1: Optional[str] = None
    value2: Optional[bool] = None
    value3: Optional[int] = None
    value4: Optional[float] = None
    status: ResourceStatus = Field(description="Active or Deleted")
    created_at: datetime = Field(description="Creation timestamp (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last mutation timestamp (UTC ISO 8601)")


class ResourceListResponse(BaseModel):
    """
    One page of GET /resources.

    No total count and no has-next flag: a page shorter than `limit`
    (possibly empty) is the only end-of-data signal.
    """

    page: int
    limit: int
    resources: List[ResourceResponse]


# ══════════════════════════════════════════════════════════════════════════
# General Endpoint Models
# ══════════════════════════════════════════════════════════════════════════


class AboutResponse(BaseModel):
    name: str
    version: str
    build: str


class HealthResponse(BaseModel):
    message: str = "OK"


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class FieldErrorModel(BaseModel):
    location: str = Field(description="path, query or body")
    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Resource not found",
            "request_id": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    errors: Optional[List[FieldErrorModel]] = Field(
        default=None, description="Violated fields (validation errors only)"
    )
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
