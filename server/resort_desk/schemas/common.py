"""Common Pydantic schemas."""

from typing import Annotated, Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, Field

# Form pickers submit these when nothing is selected
_UNSET_REFERENCES = {"", "none", "null"}


def blank_to_none(value: Any) -> Any:
    """Treat empty form values and the picker's "none" option as no value."""
    if isinstance(value, str) and value.strip().lower() in _UNSET_REFERENCES:
        return None
    return value


OptionalReference = Annotated[Optional[UUID], BeforeValidator(blank_to_none)]


class Violation(BaseModel):
    """Validation error violation."""

    path: str = Field(..., description="JSON path to the invalid field")
    message: str = Field(..., description="Validation error message")


class Problem(BaseModel):
    """RFC 9457 Problem Details response."""

    type: Optional[str] = Field(None, description="Problem type URI")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="URI reference for this occurrence")
    violations: Optional[List[Violation]] = Field(None, description="Validation errors")


class IdRequest(BaseModel):
    """Request schema addressing a single record."""

    id: UUID = Field(..., description="Record ID")


class DeleteResponse(BaseModel):
    """Response schema for delete operations."""

    id: str = Field(..., description="ID of the deleted record")
    deleted: bool = Field(True, description="Whether the record was removed")
