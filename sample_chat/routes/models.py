"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field

from sample_chat.models import ExampleRole


class SegmentBody(BaseModel):
    sample_chat: str
    char: str = Field(min_length=1)
    user: str = Field(min_length=1)


class SplitBody(BaseModel):
    sample_chat: str
    char: str = Field(min_length=1)
    user: str = Field(min_length=1)
    budget: int | None = None
    example_role: ExampleRole | None = None
