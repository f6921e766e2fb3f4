"""
Pydantic schemas for blog post endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BlogPost(BaseModel):
    id: int
    title: str
    description: str
    body: str
    created_at: datetime
    updated_at: datetime


class BlogPostInput(BaseModel):
    """
    Create/update payload. Any subset of the fields may be sent.

    A missing field, `null` and `""` all mean "no value": create stores an
    empty string, update keeps the existing value.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    body: str | None = None


class DeleteResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
