from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from homeplanner.core.datetime_utils import utc_now
from homeplanner.models.base import Base, Money, generate_id


class BudgetSettings(Base):
    __tablename__ = "budget_settings"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    # One row per user; writes are upserts.
    user_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True
    )

    total_budget: Mapped[Decimal] = mapped_column(Money)
    currency: Mapped[str] = mapped_column(String(3), default="USD")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utc_now, onupdate=utc_now)
