from __future__ import annotations

from homeplanner.planning import (
    DEFAULT_FILTERS,
    UNSET,
    ItemFilters,
    ItemSort,
    filter_and_sort,
    filter_counts,
    filter_items,
    group_by_bought_status,
    group_by_category,
    has_active_filters,
)
from homeplanner.planning.budget import UNCATEGORIZED_ID

from tests.factories import make_category, make_item, make_tag


def _sample():
    kitchen = make_category("kitchen", "Kitchen")
    office = make_category("office", "Home Office")
    urgent = make_tag("urgent")
    gift = make_tag("gift")

    a = make_item("Toaster", planned=40, category=kitchen, priority=1, created_offset=1)
    b = make_item("Desk lamp", planned=25, category=office, priority=3, tags=[gift], created_offset=2)
    c = make_item(
        "Kettle",
        planned=30,
        category=kitchen,
        priority=3,
        tags=[urgent],
        is_bought=True,
        bought=28,
        notes="stainless steel",
        created_offset=3,
    )
    d = make_item("Doormat", planned=15, created_offset=4)
    return [a, b, c, d]


def test_no_filters_returns_everything_in_input_order():
    items = _sample()
    assert not has_active_filters(DEFAULT_FILTERS)
    assert filter_items(items, DEFAULT_FILTERS) == items


def test_tag_filter_keeps_tagged_items_only():
    items = _sample()
    result = filter_items(items, ItemFilters(tag_ids=("urgent",)))
    assert [i.name for i in result] == ["Kettle"]


def test_tag_filter_is_any_of():
    items = _sample()
    result = filter_items(items, ItemFilters(tag_ids=("urgent", "gift")))
    assert [i.name for i in result] == ["Desk lamp", "Kettle"]


def test_criteria_are_combined_with_and():
    items = _sample()
    result = filter_items(items, ItemFilters(category_id="kitchen", priority=3))
    assert [i.name for i in result] == ["Kettle"]

    result = filter_items(items, ItemFilters(category_id="kitchen", is_bought=False))
    assert [i.name for i in result] == ["Toaster"]


def test_category_none_means_uncategorized_only():
    items = _sample()
    assert [i.name for i in filter_items(items, ItemFilters(category_id=None))] == ["Doormat"]
    assert len(filter_items(items, ItemFilters(category_id=UNSET))) == len(items)
    assert has_active_filters(ItemFilters(category_id=None))


def test_search_matches_name_notes_and_category_name():
    items = _sample()
    assert [i.name for i in filter_items(items, ItemFilters(search="LAMP"))] == ["Desk lamp"]
    assert [i.name for i in filter_items(items, ItemFilters(search="steel"))] == ["Kettle"]
    assert [i.name for i in filter_items(items, ItemFilters(search="office"))] == ["Desk lamp"]
    assert filter_items(items, ItemFilters(search="sofa")) == []


def test_filtering_is_idempotent():
    items = _sample()
    filters = ItemFilters(is_bought=False, search="o")
    once = filter_items(items, filters)
    assert filter_items(once, filters) == once


def test_filter_and_sort_defaults_to_newest_first():
    items = _sample()
    result = filter_and_sort(items)
    assert [i.name for i in result] == ["Doormat", "Kettle", "Desk lamp", "Toaster"]


def test_filter_and_sort_applies_both():
    items = _sample()
    result = filter_and_sort(items, ItemFilters(is_bought=False), ItemSort("price", "asc"))
    assert [i.name for i in result] == ["Doormat", "Desk lamp", "Toaster"]


def test_filter_counts_over_whole_collection():
    counts = filter_counts(_sample())

    assert counts.bought == 1
    assert counts.not_bought == 3
    assert counts.by_category == {"kitchen": 2, "office": 1, UNCATEGORIZED_ID: 1}
    assert counts.by_priority == {1: 1, 2: 1, 3: 2}
    assert counts.by_tag == {"gift": 1, "urgent": 1}


def test_filter_counts_empty_collection():
    counts = filter_counts([])
    assert counts.bought == 0
    assert counts.not_bought == 0
    assert counts.by_priority == {1: 0, 2: 0, 3: 0}
    assert counts.by_category == {}


def test_group_by_category_keeps_input_order():
    a, b, c, d = _sample()
    groups = group_by_category([a, b, c, d])

    assert list(groups) == ["kitchen", "office", None]
    assert groups["kitchen"] == [a, c]
    assert groups["office"] == [b]
    assert groups[None] == [d]
    assert group_by_category([]) == {}


def test_group_by_bought_status():
    a, b, c, d = _sample()
    split = group_by_bought_status([a, b, c, d])

    assert split.to_buy == [a, b, d]
    assert split.bought == [c]
