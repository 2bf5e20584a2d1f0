from __future__ import annotations

from decimal import Decimal

from homeplanner.models import BudgetSettings
from homeplanner.planning import effective_planned, effective_spent, summarize
from homeplanner.planning.budget import UNCATEGORIZED_ID, UNCATEGORIZED_NAME

from tests.factories import make_category, make_item, make_link


def _kitchen_items(kitchen, *, b_bought: bool = False):
    item_a = make_item("A", planned=100, category=kitchen)
    item_b = make_item(
        "B",
        planned=200,
        category=kitchen,
        links=[make_link(150, selected=True)],
        is_bought=b_bought,
        bought=140 if b_bought else None,
    )
    return [item_a, item_b]


def test_planned_uses_selected_link_and_planned_prices():
    kitchen = make_category("kitchen", "Kitchen")
    summary = summarize(None, [kitchen], _kitchen_items(kitchen))

    row = summary.categories[0]
    assert row.planned == Decimal("250")
    assert row.spent == Decimal("0")
    assert row.remaining == Decimal("250")
    assert row.percent_spent == 0.0


def test_remaining_without_category_budget_is_planned_minus_spent():
    kitchen = make_category("kitchen", "Kitchen")
    summary = summarize(None, [kitchen], _kitchen_items(kitchen, b_bought=True))

    row = summary.categories[0]
    assert row.spent == Decimal("140")
    assert row.remaining == Decimal("110")
    assert row.bought_count == 1
    assert row.item_count == 2


def test_remaining_with_category_budget_uses_budget():
    kitchen = make_category("kitchen", "Kitchen", budget=300)
    summary = summarize(None, [kitchen], _kitchen_items(kitchen, b_bought=True))

    assert summary.categories[0].remaining == Decimal("160")


def test_uncategorized_bucket_appended_last_only_when_needed():
    kitchen = make_category("kitchen", "Kitchen", order=2)
    office = make_category("office", "Office", order=1)

    summary = summarize(None, [kitchen, office], [make_item(planned=10, category=kitchen)])
    assert [c.id for c in summary.categories] == ["office", "kitchen"]

    summary = summarize(None, [kitchen, office], [make_item(planned=10), make_item(planned=5, category=office)])
    assert [c.id for c in summary.categories] == ["office", "kitchen", UNCATEGORIZED_ID]
    last = summary.categories[-1]
    assert last.name == UNCATEGORIZED_NAME
    assert last.budget is None
    assert last.planned == Decimal("10")


def test_totals_reconcile_with_category_rows():
    kitchen = make_category("kitchen", "Kitchen")
    bath = make_category("bath", "Bathroom", budget=50)
    items = [
        make_item(planned="10.10", category=kitchen, is_bought=True, bought="9.99"),
        make_item(planned="0.20", category=bath),
        make_item(links=[make_link("33.33", selected=True)], category=bath, is_bought=True, bought="30.01"),
        make_item(planned="0.10"),
    ] + [make_item(planned="0.10", category=kitchen) for _ in range(100)]

    summary = summarize(None, [kitchen, bath], items)

    assert summary.total_planned == sum((c.planned for c in summary.categories), Decimal("0"))
    assert summary.total_spent == sum((c.spent for c in summary.categories), Decimal("0"))
    assert summary.total_planned == sum((effective_planned(i) for i in items), Decimal("0"))
    assert summary.total_spent == sum((effective_spent(i) for i in items), Decimal("0"))
    # Exact decimal arithmetic: 100 * 0.10 is exactly 10.00
    assert summary.categories[0].planned == Decimal("20.10")


def test_without_settings_budget_falls_back_to_planned():
    kitchen = make_category("kitchen", "Kitchen")
    summary = summarize(None, [kitchen], _kitchen_items(kitchen, b_bought=True))

    assert summary.total_budget == Decimal("250")
    assert summary.remaining == Decimal("110")
    assert summary.percent_planned == 100.0
    assert summary.percent_spent == 56.0
    assert summary.currency == "USD"
    assert summary.has_budget_settings is False


def test_with_settings_uses_total_budget_and_currency():
    kitchen = make_category("kitchen", "Kitchen")
    settings = BudgetSettings(user_id="u1", total_budget=Decimal("1000"), currency="EUR")

    summary = summarize(settings, [kitchen], _kitchen_items(kitchen, b_bought=True))

    assert summary.total_budget == Decimal("1000")
    assert summary.remaining == Decimal("860")
    assert summary.percent_spent == 14.0
    assert summary.percent_planned == 25.0
    assert summary.currency == "EUR"


def test_zero_denominators_give_zero_percent():
    empty = make_category("empty", "Empty")
    summary = summarize(None, [empty], [])

    assert summary.total_budget == Decimal("0")
    assert summary.percent_spent == 0.0
    assert summary.percent_planned == 0.0
    assert summary.categories[0].percent_spent == 0.0

    zero_budget = BudgetSettings(user_id="u1", total_budget=Decimal("0"), currency="USD")
    summary = summarize(zero_budget, [empty], [make_item(planned=5, is_bought=True, bought=5)])
    assert summary.percent_spent == 0.0
    assert summary.remaining == Decimal("-5")


def test_default_currency_override():
    summary = summarize(None, [], [], default_currency="BRL")
    assert summary.currency == "BRL"
    assert summary.categories == []
