"""User-scoped reads that hand fully loaded objects to the planning rules."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from homeplanner.models.budget_settings import BudgetSettings
from homeplanner.models.category import Category
from homeplanner.models.item import Item


def _hydrated_items():
    return select(Item).options(
        selectinload(Item.links),
        selectinload(Item.tags),
    )


def load_items(db: Session, user_id: str) -> Sequence[Item]:
    stmt = _hydrated_items().where(Item.user_id == user_id).order_by(Item.created_at.desc(), Item.id.asc())
    return db.scalars(stmt).unique().all()


def load_item(db: Session, user_id: str, item_id: str) -> Item | None:
    stmt = _hydrated_items().where(Item.id == item_id, Item.user_id == user_id)
    return db.scalars(stmt).unique().first()


def load_categories(db: Session, user_id: str) -> Sequence[Category]:
    stmt = select(Category).where(Category.user_id == user_id).order_by(Category.order.asc(), Category.id.asc())
    return db.scalars(stmt).all()


def load_budget_settings(db: Session, user_id: str) -> BudgetSettings | None:
    return db.scalar(select(BudgetSettings).where(BudgetSettings.user_id == user_id).limit(1))
