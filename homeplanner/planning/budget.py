"""Budget rollups per category and for the whole plan.

Totals are summed from the per-category rows rather than recomputed from the
items, so the category rows always add up to the global figures.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from homeplanner.models.budget_settings import BudgetSettings
from homeplanner.models.category import Category
from homeplanner.models.item import Item
from homeplanner.planning.pricing import ZERO, effective_planned, effective_spent

UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"
UNCATEGORIZED_ICON = "📌"

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class CategoryBudgetSummary:
    id: str
    name: str
    icon: str | None
    budget: Decimal | None
    planned: Decimal
    spent: Decimal
    remaining: Decimal
    percent_spent: float
    item_count: int
    bought_count: int


@dataclass(frozen=True)
class BudgetSummary:
    total_budget: Decimal
    total_planned: Decimal
    total_spent: Decimal
    remaining: Decimal
    percent_spent: float
    percent_planned: float
    currency: str
    has_budget_settings: bool
    categories: list[CategoryBudgetSummary] = field(default_factory=list)


def percent_of(part: Decimal, whole: Decimal) -> float:
    if whole <= 0:
        return 0.0
    return float(part / whole * HUNDRED)


def _rollup(
    *,
    id: str,
    name: str,
    icon: str | None,
    budget: Decimal | None,
    items: Sequence[Item],
) -> CategoryBudgetSummary:
    planned = sum((effective_planned(i) for i in items), ZERO)
    spent = sum((effective_spent(i) for i in items), ZERO)
    remaining = (budget - spent) if budget is not None else (planned - spent)

    return CategoryBudgetSummary(
        id=id,
        name=name,
        icon=icon,
        budget=budget,
        planned=planned,
        spent=spent,
        remaining=remaining,
        percent_spent=percent_of(spent, planned),
        item_count=len(items),
        bought_count=sum(1 for i in items if i.is_bought),
    )


def summarize(
    settings: BudgetSettings | None,
    categories: Iterable[Category],
    items: Iterable[Item],
    *,
    default_currency: str = "USD",
) -> BudgetSummary:
    by_category: dict[str | None, list[Item]] = {}
    for item in items:
        by_category.setdefault(item.category_id, []).append(item)

    rows = [
        _rollup(
            id=cat.id,
            name=cat.name,
            icon=cat.icon,
            budget=cat.budget,
            items=by_category.get(cat.id, []),
        )
        for cat in sorted(categories, key=lambda c: c.order)
    ]

    uncategorized = by_category.get(None, [])
    if uncategorized:
        rows.append(
            _rollup(
                id=UNCATEGORIZED_ID,
                name=UNCATEGORIZED_NAME,
                icon=UNCATEGORIZED_ICON,
                budget=None,
                items=uncategorized,
            )
        )

    total_planned = sum((r.planned for r in rows), ZERO)
    total_spent = sum((r.spent for r in rows), ZERO)
    # Without an explicit cap the plan itself is the budget.
    total_budget = settings.total_budget if settings is not None else total_planned

    return BudgetSummary(
        total_budget=total_budget,
        total_planned=total_planned,
        total_spent=total_spent,
        remaining=total_budget - total_spent,
        percent_spent=percent_of(total_spent, total_budget),
        percent_planned=percent_of(total_planned, total_budget),
        currency=settings.currency if settings is not None and settings.currency else default_currency,
        has_budget_settings=settings is not None,
        categories=rows,
    )
