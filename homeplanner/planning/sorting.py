from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from homeplanner.models.item import Item
from homeplanner.planning.errors import UnsupportedSortField, UnsupportedSortOrder
from homeplanner.planning.pricing import effective_planned

SORT_ORDERS = ("asc", "desc")


def _name_key(item: Item) -> str:
    # Accents are dropped before comparing, so "Éclair" sorts among the e-names.
    decomposed = unicodedata.normalize("NFKD", item.name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _created_key(item: Item) -> datetime:
    return item.created_at or datetime.min


_SORT_KEYS: dict[str, Callable[[Item], Any]] = {
    "name": _name_key,
    "price": effective_planned,
    "priority": lambda item: item.priority,
    "createdAt": _created_key,
}

SORT_FIELDS = tuple(_SORT_KEYS)


@dataclass(frozen=True)
class ItemSort:
    field: str = "createdAt"
    order: str = "desc"


DEFAULT_SORT = ItemSort()


def sort_items(items: Iterable[Item], field: str, order: str = "asc") -> list[Item]:
    """Return a new list ordered by ``field``; equal keys keep their input order."""

    key = _SORT_KEYS.get(field)
    if key is None:
        raise UnsupportedSortField(field, SORT_FIELDS)
    if order not in SORT_ORDERS:
        raise UnsupportedSortOrder(order)

    # sorted() stays stable with reverse=True, so ties are never reshuffled.
    return sorted(items, key=key, reverse=order == "desc")
