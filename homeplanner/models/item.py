from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from homeplanner.core.datetime_utils import utc_now
from homeplanner.models.base import Base, Money, generate_id
from homeplanner.models.category import Category
from homeplanner.models.tag import Tag, item_tags

if TYPE_CHECKING:
    from homeplanner.models.item_link import ItemLink

PRIORITY_LOW = 1
PRIORITY_MEDIUM = 2
PRIORITY_HIGH = 3


class Item(Base):
    __tablename__ = "items"
    __table_args__ = (CheckConstraint("priority BETWEEN 1 AND 3", name="ck_items_priority"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(String(32), ForeignKey("users.id", ondelete="CASCADE"), index=True)

    # NULL means uncategorized; deleting a category moves its items here.
    category_id: Mapped[str | None] = mapped_column(
        String(32), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )

    name: Mapped[str] = mapped_column(String(200))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[int] = mapped_column(Integer, default=PRIORITY_MEDIUM)

    planned_price: Mapped[Decimal | None] = mapped_column(Money, nullable=True)
    # Only meaningful while is_bought is true
    bought_price: Mapped[Decimal | None] = mapped_column(Money, nullable=True)
    is_bought: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    bought_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utc_now, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utc_now, onupdate=utc_now)

    category: Mapped[Category | None] = relationship(Category, lazy="joined")
    links: Mapped[list["ItemLink"]] = relationship(
        "ItemLink",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ItemLink.price",
    )
    tags: Mapped[list[Tag]] = relationship(Tag, secondary=item_tags, order_by=Tag.name)

    def mark_bought(self, is_bought: bool) -> None:
        """Flip the bought flag, keeping ``bought_at`` in step with it."""

        if is_bought and not self.is_bought:
            self.bought_at = utc_now()
        elif not is_bought:
            self.bought_at = None
        self.is_bought = is_bought
