"""Common response wrapper schemas for notice and report payloads."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ActionResponse(BaseModel, Generic[T]):
    """Generic success envelope returned by every action."""

    success: bool = True
    message: str
    data: T | None = None


class ErrorResponse(BaseModel):
    """Error payload reported back to the rollup host."""

    error: str = Field(..., description="Human readable reason for the rejection")
    status: int | None = Field(None, description="Status code of a failed host call")
