from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from homeplanner.api.deps import get_current_user, get_db
from homeplanner.api.presenters import item_out
from homeplanner.api.routers.categories import get_owned_category
from homeplanner.api.routers.tags import get_owned_tag
from homeplanner.core.logging_config import get_logger
from homeplanner.db.queries import load_item, load_items
from homeplanner.models.item import Item
from homeplanner.models.item_link import ItemLink
from homeplanner.models.tag import Tag, item_tags
from homeplanner.models.user import User
from homeplanner.planning import (
    UNSET,
    ItemFilters,
    ItemSort,
    PlanningError,
    filter_and_sort,
    filter_counts,
    has_active_filters,
)
from homeplanner.planning.budget import UNCATEGORIZED_ID
from homeplanner.schemas.item import (
    FilterCountsOut,
    ItemCreate,
    ItemLinkCreate,
    ItemLinkUpdate,
    ItemListOut,
    ItemOut,
    ItemUpdate,
)

router = APIRouter(prefix="/items", tags=["items"])

logger = get_logger(__name__)


def _get_owned_item(db: Session, current_user: User, item_id: str) -> Item:
    row = load_item(db, current_user.id, item_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return row


def _reload(db: Session, current_user: User, item_id: str) -> ItemOut:
    db.expire_all()
    return item_out(_get_owned_item(db, current_user, item_id))


def _resolve_tags(db: Session, current_user: User, tag_ids: list[str]) -> list[Tag]:
    unique_ids = list(dict.fromkeys(tag_ids))
    if not unique_ids:
        return []
    tags = db.scalars(select(Tag).where(Tag.user_id == current_user.id, Tag.id.in_(unique_ids))).all()
    if len(tags) != len(unique_ids):
        raise HTTPException(status_code=400, detail="Invalid tagIds")
    return list(tags)


def _parse_filters(
    isBought: bool | None,
    categoryId: str | None,
    priority: int | None,
    tagIds: list[str] | None,
    search: str | None,
) -> ItemFilters:
    category_id: str | None | object = UNSET
    if categoryId is not None:
        # The synthetic bucket id selects items without a category.
        category_id = None if categoryId == UNCATEGORIZED_ID else categoryId

    return ItemFilters(
        is_bought=isBought,
        category_id=category_id,
        priority=priority,
        tag_ids=tuple(tagIds or ()),
        search=(search or "").strip() or None,
    )


# ============================================================================
# Items
# ============================================================================


@router.get("", response_model=ItemListOut)
def list_items(
    isBought: bool | None = None,
    categoryId: str | None = None,
    priority: int | None = Query(default=None, ge=1, le=3),
    tagIds: list[str] | None = Query(default=None),
    search: str | None = None,
    sortField: str = "createdAt",
    sortOrder: str = "desc",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemListOut:
    filters = _parse_filters(isBought, categoryId, priority, tagIds, search)

    try:
        rows = filter_and_sort(load_items(db, current_user.id), filters, ItemSort(sortField, sortOrder))
    except PlanningError as exc:
        logger.warning("Rejected item listing", extra={"user_id": current_user.id, "error": str(exc)})
        raise HTTPException(status_code=400, detail=str(exc))

    return ItemListOut(
        items=[item_out(r) for r in rows],
        total=len(rows),
        filtersActive=has_active_filters(filters),
    )


@router.get("/filter-counts", response_model=FilterCountsOut)
def get_filter_counts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> FilterCountsOut:
    counts = filter_counts(load_items(db, current_user.id))
    return FilterCountsOut(
        bought=counts.bought,
        notBought=counts.not_bought,
        byCategory=counts.by_category,
        byPriority=counts.by_priority,
        byTag=counts.by_tag,
    )


@router.get("/{item_id}", response_model=ItemOut)
def get_item(
    item_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    return item_out(_get_owned_item(db, current_user, item_id))


@router.post("", response_model=ItemOut)
def create_item(
    payload: ItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Item name is required")

    category_id: str | None = None
    if payload.categoryId is not None:
        category_id = get_owned_category(db, current_user, payload.categoryId).id

    row = Item(
        user_id=current_user.id,
        category_id=category_id,
        name=name,
        notes=payload.notes or None,
        priority=payload.priority,
        planned_price=payload.plannedPrice,
        is_bought=False,
    )
    row.tags = _resolve_tags(db, current_user, payload.tagIds)
    db.add(row)
    db.commit()

    logger.info("Item created", extra={"user_id": current_user.id, "item_id": row.id})
    return _reload(db, current_user, row.id)


@router.patch("/{item_id}", response_model=ItemOut)
def update_item(
    item_id: str,
    payload: ItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    row = _get_owned_item(db, current_user, item_id)
    fields = payload.model_fields_set

    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise HTTPException(status_code=400, detail="Item name is required")
        row.name = name
    if "categoryId" in fields:
        if payload.categoryId is None:
            row.category_id = None
        else:
            row.category_id = get_owned_category(db, current_user, payload.categoryId).id
    if payload.priority is not None:
        row.priority = payload.priority
    if "plannedPrice" in fields:
        row.planned_price = payload.plannedPrice
    if "boughtPrice" in fields:
        row.bought_price = payload.boughtPrice
    if "notes" in fields:
        row.notes = payload.notes or None
    if payload.isBought is not None:
        row.mark_bought(payload.isBought)

    db.add(row)
    db.commit()
    return _reload(db, current_user, row.id)


@router.post("/{item_id}/toggle-bought", response_model=ItemOut)
def toggle_item_bought(
    item_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    row = _get_owned_item(db, current_user, item_id)
    row.mark_bought(not row.is_bought)
    db.add(row)
    db.commit()
    return _reload(db, current_user, row.id)


@router.delete("/{item_id}")
def delete_item(
    item_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    row = _get_owned_item(db, current_user, item_id)
    db.delete(row)
    db.commit()

    logger.info("Item deleted", extra={"user_id": current_user.id, "item_id": item_id})
    return {"ok": True}


# ============================================================================
# Purchase-option links
# ============================================================================


def _get_item_link(db: Session, item: Item, link_id: str) -> ItemLink:
    link = db.get(ItemLink, link_id)
    if not link or link.item_id != item.id:
        raise HTTPException(status_code=404, detail="Link not found")
    return link


@router.post("/{item_id}/links", response_model=ItemOut)
def add_item_link(
    item_id: str,
    payload: ItemLinkCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    item = _get_owned_item(db, current_user, item_id)

    store = payload.store.strip()
    if not store:
        raise HTTPException(status_code=400, detail="Store is required")

    link_count = db.scalar(select(func.count(ItemLink.id)).where(ItemLink.item_id == item.id))

    link = ItemLink(
        item_id=item.id,
        url=payload.url.strip(),
        store=store,
        price=payload.price,
        notes=payload.notes or None,
        # The first option of an item becomes its selected one.
        is_selected=not link_count,
    )
    db.add(link)
    db.commit()
    return _reload(db, current_user, item.id)


@router.patch("/{item_id}/links/{link_id}", response_model=ItemOut)
def update_item_link(
    item_id: str,
    link_id: str,
    payload: ItemLinkUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    item = _get_owned_item(db, current_user, item_id)
    link = _get_item_link(db, item, link_id)
    fields = payload.model_fields_set

    if payload.url is not None:
        link.url = payload.url.strip()
    if payload.store is not None:
        store = payload.store.strip()
        if not store:
            raise HTTPException(status_code=400, detail="Store is required")
        link.store = store
    if payload.price is not None:
        link.price = payload.price
    if "notes" in fields:
        link.notes = payload.notes or None

    db.add(link)
    db.commit()
    return _reload(db, current_user, item.id)


@router.delete("/{item_id}/links/{link_id}", response_model=ItemOut)
def delete_item_link(
    item_id: str,
    link_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    item = _get_owned_item(db, current_user, item_id)
    link = _get_item_link(db, item, link_id)
    item.links.remove(link)
    db.commit()
    return _reload(db, current_user, item.id)


@router.post("/{item_id}/links/{link_id}/select", response_model=ItemOut)
def select_item_link(
    item_id: str,
    link_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    item = _get_owned_item(db, current_user, item_id)
    link = _get_item_link(db, item, link_id)

    # Clear and set share one transaction; readers never see zero or two selected links.
    db.execute(update(ItemLink).where(ItemLink.item_id == item.id).values(is_selected=False))
    db.execute(update(ItemLink).where(ItemLink.id == link.id).values(is_selected=True))
    db.commit()

    logger.info("Link selected", extra={"user_id": current_user.id, "item_id": item.id, "link_id": link.id})
    return _reload(db, current_user, item.id)


# ============================================================================
# Item tags
# ============================================================================


@router.put("/{item_id}/tags/{tag_id}", response_model=ItemOut)
def add_tag_to_item(
    item_id: str,
    tag_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    item = _get_owned_item(db, current_user, item_id)
    tag = get_owned_tag(db, current_user, tag_id)

    # Re-adding an existing pair is a no-op.
    if all(t.id != tag.id for t in item.tags):
        item.tags.append(tag)
        db.commit()
    return _reload(db, current_user, item.id)


@router.delete("/{item_id}/tags/{tag_id}", response_model=ItemOut)
def remove_tag_from_item(
    item_id: str,
    tag_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ItemOut:
    item = _get_owned_item(db, current_user, item_id)
    db.execute(
        item_tags.delete().where(item_tags.c.item_id == item.id, item_tags.c.tag_id == tag_id)
    )
    db.commit()
    return _reload(db, current_user, item.id)
