"""Response builders shared by routers."""

from __future__ import annotations

from homeplanner.core.datetime_utils import as_utc
from homeplanner.models.item import Item
from homeplanner.models.item_link import ItemLink
from homeplanner.planning import effective_planned, lowest_link_price, selected_link
from homeplanner.schemas.item import ItemCategoryOut, ItemLinkOut, ItemOut
from homeplanner.schemas.tag import TagOut


def link_out(link: ItemLink) -> ItemLinkOut:
    return ItemLinkOut(
        id=link.id,
        itemId=link.item_id,
        store=link.store,
        url=link.url,
        price=link.price,
        notes=link.notes,
        isSelected=link.is_selected,
    )


def item_out(row: Item) -> ItemOut:
    chosen = selected_link(row)
    return ItemOut(
        id=row.id,
        name=row.name,
        notes=row.notes,
        priority=row.priority,
        plannedPrice=row.planned_price,
        boughtPrice=row.bought_price,
        isBought=row.is_bought,
        boughtAt=as_utc(row.bought_at),
        createdAt=as_utc(row.created_at),
        updatedAt=as_utc(row.updated_at),
        categoryId=row.category_id,
        category=(
            ItemCategoryOut(id=row.category.id, name=row.category.name, icon=row.category.icon)
            if row.category is not None
            else None
        ),
        tags=[TagOut(id=t.id, name=t.name, color=t.color) for t in row.tags],
        links=[link_out(link) for link in row.links],
        lowestPrice=lowest_link_price(row),
        selectedLink=link_out(chosen) if chosen is not None else None,
        effectivePrice=effective_planned(row),
    )
