from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from homeplanner.api.deps import get_current_user, get_db
from homeplanner.api.routers.categories import get_owned_category
from homeplanner.core.config import settings
from homeplanner.core.logging_config import get_logger
from homeplanner.db.queries import load_budget_settings, load_categories, load_items
from homeplanner.models.budget_settings import BudgetSettings
from homeplanner.models.user import User
from homeplanner.planning import BudgetSummary, summarize
from homeplanner.schemas.budget import (
    BudgetSettingsIn,
    BudgetSettingsOut,
    BudgetSummaryOut,
    CategoryBudgetIn,
    CategoryBudgetSummaryOut,
)
from homeplanner.schemas.category import CategoryOut

router = APIRouter(prefix="/budget", tags=["budget"])

logger = get_logger(__name__)


def _settings_out(row: BudgetSettings) -> BudgetSettingsOut:
    return BudgetSettingsOut(id=row.id, totalBudget=row.total_budget, currency=row.currency)


def _summary_out(summary: BudgetSummary) -> BudgetSummaryOut:
    return BudgetSummaryOut(
        totalBudget=summary.total_budget,
        totalPlanned=summary.total_planned,
        totalSpent=summary.total_spent,
        remaining=summary.remaining,
        percentSpent=summary.percent_spent,
        percentPlanned=summary.percent_planned,
        currency=summary.currency,
        hasBudgetSettings=summary.has_budget_settings,
        categories=[
            CategoryBudgetSummaryOut(
                id=c.id,
                name=c.name,
                icon=c.icon,
                budget=c.budget,
                planned=c.planned,
                spent=c.spent,
                remaining=c.remaining,
                percentSpent=c.percent_spent,
                itemCount=c.item_count,
                boughtCount=c.bought_count,
            )
            for c in summary.categories
        ],
    )


@router.get("/settings", response_model=BudgetSettingsOut | None)
def get_budget_settings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BudgetSettingsOut | None:
    row = load_budget_settings(db, current_user.id)
    return _settings_out(row) if row is not None else None


@router.put("/settings", response_model=BudgetSettingsOut)
def set_budget(
    payload: BudgetSettingsIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BudgetSettingsOut:
    if payload.totalBudget < 0:
        raise HTTPException(status_code=400, detail="Budget must be positive")

    currency = (payload.currency or settings.default_currency).upper()

    row = load_budget_settings(db, current_user.id)
    if row is None:
        row = BudgetSettings(user_id=current_user.id, total_budget=payload.totalBudget, currency=currency)
    else:
        row.total_budget = payload.totalBudget
        row.currency = currency

    db.add(row)
    db.commit()
    db.refresh(row)

    logger.info("Budget set", extra={"user_id": current_user.id, "total_budget": str(row.total_budget)})
    return _settings_out(row)


@router.put("/categories/{category_id}", response_model=CategoryOut)
def set_category_budget(
    category_id: str,
    payload: CategoryBudgetIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryOut:
    row = get_owned_category(db, current_user, category_id)
    row.budget = payload.budget
    db.add(row)
    db.commit()
    db.refresh(row)

    return CategoryOut(
        id=row.id,
        name=row.name,
        icon=row.icon,
        isDefault=row.is_default,
        order=row.order,
        budget=row.budget,
    )


@router.get("/summary", response_model=BudgetSummaryOut)
def get_budget_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BudgetSummaryOut:
    summary = summarize(
        load_budget_settings(db, current_user.id),
        load_categories(db, current_user.id),
        load_items(db, current_user.id),
        default_currency=settings.default_currency,
    )
    return _summary_out(summary)
