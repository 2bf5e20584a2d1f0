"""In-memory object builders for the planning rules; nothing here touches a database."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from itertools import count

from homeplanner.models import Category, Item, ItemLink, Tag

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)
_ids = count(1)


def _money(value) -> Decimal | None:
    return Decimal(str(value)) if value is not None else None


def make_link(price, *, selected: bool = False, store: str = "Shop") -> ItemLink:
    return ItemLink(
        id=f"link{next(_ids)}",
        store=store,
        url="https://example.com/p",
        price=_money(price),
        is_selected=selected,
    )


def make_tag(tag_id: str, name: str | None = None) -> Tag:
    return Tag(id=tag_id, name=name or tag_id, user_id="u1")


def make_category(cat_id: str, name: str, *, order: int = 0, budget=None) -> Category:
    return Category(
        id=cat_id,
        user_id="u1",
        name=name,
        icon=None,
        is_default=False,
        order=order,
        budget=_money(budget),
    )


def make_item(
    name: str = "Item",
    *,
    planned=None,
    bought=None,
    is_bought: bool = False,
    category: Category | None = None,
    priority: int = 2,
    links: list[ItemLink] | None = None,
    tags: list[Tag] | None = None,
    notes: str | None = None,
    created_offset: int = 0,
) -> Item:
    item = Item(
        id=f"item{next(_ids)}",
        user_id="u1",
        name=name,
        notes=notes,
        priority=priority,
        planned_price=_money(planned),
        bought_price=_money(bought),
        is_bought=is_bought,
        category_id=category.id if category is not None else None,
        created_at=BASE_TIME + timedelta(minutes=created_offset),
        links=links or [],
        tags=tags or [],
    )
    item.category = category
    return item
