from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class BudgetSettingsIn(BaseModel):
    # Sign is checked by the handler so the error reads like the rest of the API.
    totalBudget: Decimal = Field(max_digits=12, decimal_places=2)
    currency: str | None = Field(default=None, min_length=3, max_length=3)


class BudgetSettingsOut(BaseModel):
    id: str
    totalBudget: Decimal
    currency: str


class CategoryBudgetIn(BaseModel):
    budget: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class CategoryBudgetSummaryOut(BaseModel):
    id: str
    name: str
    icon: str | None
    budget: Decimal | None
    planned: Decimal
    spent: Decimal
    remaining: Decimal
    percentSpent: float
    itemCount: int
    boughtCount: int


class BudgetSummaryOut(BaseModel):
    totalBudget: Decimal
    totalPlanned: Decimal
    totalSpent: Decimal
    remaining: Decimal
    percentSpent: float
    percentPlanned: float
    currency: str
    hasBudgetSettings: bool
    categories: list[CategoryBudgetSummaryOut]
