from __future__ import annotations

from decimal import Decimal

from homeplanner.models.item import Item
from homeplanner.models.item_link import ItemLink

ZERO = Decimal("0")


def selected_link(item: Item) -> ItemLink | None:
    for link in item.links:
        if link.is_selected:
            return link
    return None


def effective_planned(item: Item) -> Decimal:
    """What the item is expected to cost.

    The selected purchase option wins over the hand-entered planned price;
    an item with neither is planned at zero.
    """

    link = selected_link(item)
    if link is not None:
        return link.price
    if item.planned_price is not None:
        return item.planned_price
    return ZERO


def effective_spent(item: Item) -> Decimal:
    # A bought item without a recorded price counts as zero spend, not its planned cost.
    if not item.is_bought:
        return ZERO
    if item.bought_price is not None:
        return item.bought_price
    return ZERO


def lowest_link_price(item: Item) -> Decimal | None:
    if not item.links:
        return None
    return min(link.price for link in item.links)
