"""Pydantic schemas for course and lesson payloads."""

from pydantic import BaseModel, Field


class CourseResponse(BaseModel):
    """Public view of a course, without its lessons."""

    id: str
    name: str
    owner: str
    img_url: str
    description: str
    created_at: int = Field(
        ..., serialization_alias="createdAt", description="Creation time in epoch milliseconds"
    )


class LessonResponse(BaseModel):
    """Public view of a lesson."""

    id: str
    name: str
    module: str
    content: str
    created_at: int = Field(
        ..., serialization_alias="createdAt", description="Creation time in epoch milliseconds"
    )
