"""
Blog Read Schemas

Pydantic projections of Post/Author rows handed to the templates. Route
handlers and templates never touch ORM instances, so nothing lazy-loads
after the request's session is gone.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthorSchema(BaseModel):
    """Author fields shown on the post detail page."""
    model_config = ConfigDict(from_attributes=True)

    name: Optional[str] = None
    image: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or 'Anonymous'


class PostCardSchema(BaseModel):
    """Summary card on the blog listing."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    summary: Optional[str] = None
    created_at: datetime
    view_count: int = Field(default=0, ge=0)


class PostDetailSchema(PostCardSchema):
    """Full post with author and estimated reading time."""

    content: str
    author: AuthorSchema
    reading_time: int = Field(default=1, ge=1, description="Minutes")
