from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from homeplanner.core.datetime_utils import utc_now
from homeplanner.models.base import Base, generate_id


class ItemSuggestion(Base):
    __tablename__ = "item_suggestions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)

    name: Mapped[str] = mapped_column(String(200), index=True)
    category_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    icon: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # System rows are shared by everyone and have no owner.
    is_system: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    user_id: Mapped[str | None] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    usage_count: Mapped[int] = mapped_column(Integer, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utc_now)
