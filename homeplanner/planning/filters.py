from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from homeplanner.models.item import PRIORITY_HIGH, PRIORITY_LOW, PRIORITY_MEDIUM, Item
from homeplanner.planning.budget import UNCATEGORIZED_ID
from homeplanner.planning.sorting import DEFAULT_SORT, ItemSort, sort_items


class _Unset:
    """Marks a criterion that was not given at all (distinct from ``None``)."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class ItemFilters:
    """Item criteria, combined with AND.

    ``category_id`` has three states: ``UNSET`` (any category), ``None``
    (only uncategorized items) or a concrete id. ``tag_ids`` matches items
    carrying at least one of the given tags.
    """

    is_bought: bool | None = None
    category_id: str | None | _Unset = UNSET
    priority: int | None = None
    tag_ids: tuple[str, ...] = ()
    search: str | None = None


DEFAULT_FILTERS = ItemFilters()


def has_active_filters(filters: ItemFilters) -> bool:
    return (
        filters.is_bought is not None
        or filters.category_id is not UNSET
        or filters.priority is not None
        or bool(filters.tag_ids)
        or bool(filters.search)
    )


def _matches_search(item: Item, needle: str) -> bool:
    if needle in item.name.casefold():
        return True
    if item.notes and needle in item.notes.casefold():
        return True
    if item.category is not None and needle in item.category.name.casefold():
        return True
    return False


def _matches(item: Item, filters: ItemFilters, tag_ids: frozenset[str], needle: str) -> bool:
    if filters.is_bought is not None and item.is_bought != filters.is_bought:
        return False

    if filters.category_id is not UNSET and item.category_id != filters.category_id:
        return False

    if filters.priority is not None and item.priority != filters.priority:
        return False

    if tag_ids and not any(tag.id in tag_ids for tag in item.tags):
        return False

    if needle and not _matches_search(item, needle):
        return False

    return True


def filter_items(items: Sequence[Item], filters: ItemFilters) -> list[Item]:
    """Keep the items matching every given criterion, preserving their order."""

    if not has_active_filters(filters):
        return list(items)

    tag_ids = frozenset(filters.tag_ids)
    needle = (filters.search or "").casefold()
    return [item for item in items if _matches(item, filters, tag_ids, needle)]


def filter_and_sort(
    items: Sequence[Item],
    filters: ItemFilters = DEFAULT_FILTERS,
    sort: ItemSort = DEFAULT_SORT,
) -> list[Item]:
    return sort_items(filter_items(items, filters), sort.field, sort.order)


@dataclass
class FilterCounts:
    bought: int = 0
    not_bought: int = 0
    by_category: dict[str, int] = field(default_factory=dict)
    by_priority: dict[int, int] = field(
        default_factory=lambda: {PRIORITY_LOW: 0, PRIORITY_MEDIUM: 0, PRIORITY_HIGH: 0}
    )
    by_tag: dict[str, int] = field(default_factory=dict)


def filter_counts(items: Iterable[Item]) -> FilterCounts:
    """Badge counts over the whole, unfiltered collection in one pass."""

    counts = FilterCounts()
    for item in items:
        if item.is_bought:
            counts.bought += 1
        else:
            counts.not_bought += 1

        category_key = item.category_id or UNCATEGORIZED_ID
        counts.by_category[category_key] = counts.by_category.get(category_key, 0) + 1

        counts.by_priority[item.priority] = counts.by_priority.get(item.priority, 0) + 1

        for tag in item.tags:
            counts.by_tag[tag.id] = counts.by_tag.get(tag.id, 0) + 1

    return counts


def group_by_category(items: Iterable[Item]) -> dict[str | None, list[Item]]:
    """Bucket items by ``category_id`` (``None`` for uncategorized), keeping input order."""

    groups: dict[str | None, list[Item]] = {}
    for item in items:
        groups.setdefault(item.category_id, []).append(item)
    return groups


@dataclass(frozen=True)
class BoughtSplit:
    to_buy: list[Item]
    bought: list[Item]


def group_by_bought_status(items: Iterable[Item]) -> BoughtSplit:
    to_buy: list[Item] = []
    bought: list[Item] = []
    for item in items:
        (bought if item.is_bought else to_buy).append(item)
    return BoughtSplit(to_buy=to_buy, bought=bought)
