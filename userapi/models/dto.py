"""Data Transfer Objects - API contracts."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from typing import Optional


class UserPayload(BaseModel):
    """Request body for creating or replacing a user.

    Every field is optional at parse time; the service validator decides
    what is missing so clients get its ordered error messages.
    """
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    age: Optional[StrictInt] = None
    password: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UserDTO(BaseModel):
    """User data for API responses."""
    id: int
    username: str
    email: str
    age: int
    password: str

    model_config = ConfigDict(from_attributes=True)


class ExistsResponse(BaseModel):
    """Response for the existence check."""
    exists: bool
    user_id: int = Field(serialization_alias="userId")


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
