"""Pure planning rules: pricing, budget rollups, item filtering and sorting.

Everything in this package works on already-loaded, user-scoped objects and
performs no I/O.
"""

from homeplanner.planning.budget import BudgetSummary, CategoryBudgetSummary, summarize
from homeplanner.planning.errors import PlanningError, UnsupportedSortField, UnsupportedSortOrder
from homeplanner.planning.filters import (
    DEFAULT_FILTERS,
    UNSET,
    BoughtSplit,
    FilterCounts,
    ItemFilters,
    filter_and_sort,
    filter_counts,
    filter_items,
    group_by_bought_status,
    group_by_category,
    has_active_filters,
)
from homeplanner.planning.pricing import effective_planned, effective_spent, lowest_link_price, selected_link
from homeplanner.planning.sorting import DEFAULT_SORT, SORT_FIELDS, SORT_ORDERS, ItemSort, sort_items

__all__ = [
    "BoughtSplit",
    "BudgetSummary",
    "CategoryBudgetSummary",
    "DEFAULT_FILTERS",
    "DEFAULT_SORT",
    "FilterCounts",
    "ItemFilters",
    "ItemSort",
    "PlanningError",
    "SORT_FIELDS",
    "SORT_ORDERS",
    "UNSET",
    "UnsupportedSortField",
    "UnsupportedSortOrder",
    "effective_planned",
    "effective_spent",
    "filter_and_sort",
    "filter_counts",
    "filter_items",
    "group_by_bought_status",
    "group_by_category",
    "has_active_filters",
    "lowest_link_price",
    "selected_link",
    "sort_items",
    "summarize",
]
