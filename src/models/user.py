"""
User record Pydantic models
"""

from typing import Any, Mapping, Optional
from pydantic import BaseModel, Field

# Bounds of the PostgreSQL INTEGER columns userid and kmmax
INT4_MIN = -2147483648
INT4_MAX = 2147483647


class UserPayload(BaseModel):
    name: str
    kmmax: int = Field(..., ge=INT4_MIN, le=INT4_MAX, description="Maximum distance in kilometers")
    niveau: str = Field(..., description="Level or category label")


class UserCreateRequest(UserPayload):
    """Fields of a new user; the id is assigned by the database"""


class UserUpdateRequest(UserPayload):
    """Full replacement of name, kmmax and niveau"""


class UserResponse(BaseModel):
    id: int
    name: Optional[str] = None
    kmmax: Optional[int] = None
    niveau: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "UserResponse":
        return cls(id=row["id"], name=row["name"], kmmax=row["kmmax"], niveau=row["niveau"])


class UserMessageResponse(BaseModel):
    id: int
    message: str
