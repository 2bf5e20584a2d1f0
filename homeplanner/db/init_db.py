from __future__ import annotations

from sqlalchemy import func, inspect, select
from sqlalchemy.orm import Session

from homeplanner.core.config import settings
from homeplanner.core.logging_config import get_logger
from homeplanner.db.defaults import DEFAULT_CATEGORIES, DEFAULT_SUGGESTIONS
from homeplanner.models.base import Base
from homeplanner.models.category import Category
from homeplanner.models.item_suggestion import ItemSuggestion

logger = get_logger(__name__)


def seed_default_categories(db: Session, user_id: str) -> bool:
    """Give a user the starter category set. No-op once they have any category.

    Caller commits.
    """

    existing = db.scalar(select(func.count(Category.id)).where(Category.user_id == user_id))
    if existing:
        return False

    db.add_all(
        [
            Category(user_id=user_id, name=name, icon=None, is_default=True, order=order)
            for name, order in DEFAULT_CATEGORIES
        ]
    )
    return True


def seed_system_suggestions(db: Session) -> bool:
    existing = db.scalar(select(func.count(ItemSuggestion.id)).where(ItemSuggestion.is_system == True))  # noqa: E712
    if existing:
        return False

    db.add_all(
        [
            ItemSuggestion(name=name, category_name=category_name, is_system=True, user_id=None)
            for name, category_name in DEFAULT_SUGGESTIONS
        ]
    )
    return True


def ensure_seed_data(db: Session) -> None:
    engine = db.get_bind()
    if settings.auto_create_schema:
        Base.metadata.create_all(engine)

    # If migrations haven't been applied yet, don't fail startup.
    if not inspect(engine).has_table(ItemSuggestion.__tablename__):
        logger.warning("Schema not found; run `alembic upgrade head` before serving requests")
        return

    if settings.seed_system_suggestions and seed_system_suggestions(db):
        db.commit()
        logger.info("Seeded system suggestions", extra={"count": len(DEFAULT_SUGGESTIONS)})
