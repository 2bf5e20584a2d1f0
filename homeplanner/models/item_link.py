from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from homeplanner.core.datetime_utils import utc_now
from homeplanner.models.base import Base, Money, generate_id

if TYPE_CHECKING:
    from homeplanner.models.item import Item


class ItemLink(Base):
    __tablename__ = "item_links"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    item_id: Mapped[str] = mapped_column(String(32), ForeignKey("items.id", ondelete="CASCADE"), index=True)

    store: Mapped[str] = mapped_column(String(100))
    url: Mapped[str] = mapped_column(String(2000))
    price: Mapped[Decimal] = mapped_column(Money)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # At most one selected link per item; the selected price is the item's planned cost.
    is_selected: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utc_now, onupdate=utc_now)

    item: Mapped["Item"] = relationship("Item", back_populates="links")
