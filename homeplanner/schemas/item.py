from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from homeplanner.schemas.tag import TagOut


class ItemLinkCreate(BaseModel):
    url: str = Field(min_length=1, max_length=2000)
    store: str = Field(min_length=1, max_length=100)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    notes: str | None = None


class ItemLinkUpdate(BaseModel):
    url: str | None = Field(default=None, min_length=1, max_length=2000)
    store: str | None = Field(default=None, min_length=1, max_length=100)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    notes: str | None = None


class ItemLinkOut(BaseModel):
    id: str
    itemId: str
    store: str
    url: str
    price: Decimal
    notes: str | None
    isSelected: bool


class ItemCategoryOut(BaseModel):
    id: str
    name: str
    icon: str | None


class ItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    categoryId: str | None = None
    priority: int = Field(default=2, ge=1, le=3)
    plannedPrice: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    notes: str | None = None
    tagIds: list[str] = Field(default_factory=list)


class ItemUpdate(BaseModel):
    """Partial update.

    Only fields present in the request body are applied, so an explicit
    ``"categoryId": null`` moves the item to Uncategorized while an omitted
    ``categoryId`` leaves it where it is.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    categoryId: str | None = None
    priority: int | None = Field(default=None, ge=1, le=3)
    plannedPrice: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    boughtPrice: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    notes: str | None = None
    isBought: bool | None = None


class ItemOut(BaseModel):
    id: str
    name: str
    notes: str | None
    priority: int
    plannedPrice: Decimal | None
    boughtPrice: Decimal | None
    isBought: bool
    boughtAt: datetime | None
    createdAt: datetime
    updatedAt: datetime
    categoryId: str | None
    category: ItemCategoryOut | None
    tags: list[TagOut] = Field(default_factory=list)
    links: list[ItemLinkOut] = Field(default_factory=list)

    # Derived
    lowestPrice: Decimal | None = None
    selectedLink: ItemLinkOut | None = None
    effectivePrice: Decimal


class ItemListOut(BaseModel):
    items: list[ItemOut]
    total: int
    filtersActive: bool


class FilterCountsOut(BaseModel):
    bought: int
    notBought: int
    byCategory: dict[str, int]
    byPriority: dict[int, int]
    byTag: dict[str, int]
