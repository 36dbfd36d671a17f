"""Pydantic schemas for user payloads."""

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """Public view of a user; cart, waitlist and enrollments are not included."""

    id: str
    address: str
    created_at: int = Field(
        ..., serialization_alias="createdAt", description="Creation time in epoch milliseconds"
    )
