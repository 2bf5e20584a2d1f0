from __future__ import annotations

from pydantic import BaseModel, Field


class SuggestionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    categoryName: str | None = Field(default=None, max_length=100)
    icon: str | None = Field(default=None, max_length=32)


class SuggestionOut(BaseModel):
    id: str
    name: str
    categoryName: str | None
    icon: str | None
    isSystem: bool
    usageCount: int
