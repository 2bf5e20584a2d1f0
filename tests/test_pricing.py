from __future__ import annotations

from decimal import Decimal

from homeplanner.planning import effective_planned, effective_spent, lowest_link_price, selected_link

from tests.factories import make_item, make_link


def test_selected_link_price_wins_over_planned_price():
    item = make_item(planned=200, links=[make_link(180), make_link(150, selected=True)])
    assert effective_planned(item) == Decimal("150")


def test_planned_price_used_without_selected_link():
    item = make_item(planned=100, links=[make_link(90)])
    assert effective_planned(item) == Decimal("100")


def test_planned_defaults_to_zero():
    assert effective_planned(make_item()) == Decimal("0")


def test_spent_is_zero_until_bought():
    assert effective_spent(make_item(planned=50, bought=45, is_bought=False)) == Decimal("0")
    assert effective_spent(make_item(planned=50, bought=45, is_bought=True)) == Decimal("45")


def test_bought_without_price_counts_as_zero_spend():
    item = make_item(planned=300, is_bought=True)
    assert effective_spent(item) == Decimal("0")


def test_lowest_link_price():
    item = make_item(links=[make_link("19.99"), make_link("9.50"), make_link(12)])
    assert lowest_link_price(item) == Decimal("9.50")
    assert lowest_link_price(make_item()) is None


def test_selected_link_none_when_nothing_selected():
    assert selected_link(make_item(links=[make_link(1), make_link(2)])) is None
