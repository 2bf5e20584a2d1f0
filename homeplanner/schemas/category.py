from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from homeplanner.schemas.item import ItemOut


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=32)
    budget: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class CategoryUpdate(BaseModel):
    """Partial update. Omitted fields stay as they are; ``budget: null`` removes the cap."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=32)
    budget: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    order: int | None = None


class CategoryReorder(BaseModel):
    orderedIds: list[str]


class CategoryOut(BaseModel):
    id: str
    name: str
    icon: str | None
    isDefault: bool
    order: int
    budget: Decimal | None
    itemCount: int = 0


class CategoryWithItemsOut(CategoryOut):
    boughtCount: int = 0
    items: list[ItemOut] = Field(default_factory=list)
