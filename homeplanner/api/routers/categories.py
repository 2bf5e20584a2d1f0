from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from homeplanner.api.deps import get_current_user, get_db
from homeplanner.api.presenters import item_out
from homeplanner.core.logging_config import get_logger
from homeplanner.db.init_db import seed_default_categories
from homeplanner.db.queries import load_categories, load_items
from homeplanner.models.category import Category
from homeplanner.models.item import Item
from homeplanner.models.user import User
from homeplanner.planning import group_by_bought_status, group_by_category
from homeplanner.schemas.category import (
    CategoryCreate,
    CategoryOut,
    CategoryReorder,
    CategoryUpdate,
    CategoryWithItemsOut,
)

router = APIRouter(prefix="/categories", tags=["categories"])

logger = get_logger(__name__)


def get_owned_category(db: Session, current_user: User, category_id: str) -> Category:
    row = db.get(Category, category_id)
    if not row or row.user_id != current_user.id:
        raise HTTPException(status_code=404, detail="Category not found")
    return row


def _item_counts(db: Session, user_id: str) -> dict[str, int]:
    rows = db.execute(
        select(Item.category_id, func.count(Item.id))
        .where(Item.user_id == user_id, Item.category_id.is_not(None))
        .group_by(Item.category_id)
    ).all()
    return {str(category_id): int(count) for category_id, count in rows}


def _to_out(row: Category, item_count: int = 0) -> CategoryOut:
    return CategoryOut(
        id=row.id,
        name=row.name,
        icon=row.icon,
        isDefault=row.is_default,
        order=row.order,
        budget=row.budget,
        itemCount=item_count,
    )


def _commit_unique_name(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Category name already exists")


@router.get("", response_model=list[CategoryOut])
def list_categories(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[CategoryOut]:
    counts = _item_counts(db, current_user.id)
    return [_to_out(r, counts.get(r.id, 0)) for r in load_categories(db, current_user.id)]


@router.get("/with-items", response_model=list[CategoryWithItemsOut])
def list_categories_with_items(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[CategoryWithItemsOut]:
    """Categories in display order, each with its items newest first.

    Uncategorized items are not part of this view.
    """

    groups = group_by_category(load_items(db, current_user.id))

    out: list[CategoryWithItemsOut] = []
    for row in load_categories(db, current_user.id):
        items = groups.get(row.id, [])
        out.append(
            CategoryWithItemsOut(
                **_to_out(row, len(items)).model_dump(),
                boughtCount=len(group_by_bought_status(items).bought),
                items=[item_out(i) for i in items],
            )
        )
    return out


@router.post("", response_model=CategoryOut)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryOut:
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Category name is required")

    max_order = db.scalar(select(func.max(Category.order)).where(Category.user_id == current_user.id))

    row = Category(
        user_id=current_user.id,
        name=name,
        icon=payload.icon or None,
        is_default=False,
        order=int(max_order or 0) + 1,
        budget=payload.budget,
    )
    db.add(row)
    _commit_unique_name(db)
    db.refresh(row)

    logger.info("Category created", extra={"user_id": current_user.id, "category_id": row.id})
    return _to_out(row)


@router.post("/seed", response_model=list[CategoryOut])
def seed_categories(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[CategoryOut]:
    if seed_default_categories(db, current_user.id):
        db.commit()
        logger.info("Default categories seeded", extra={"user_id": current_user.id})

    counts = _item_counts(db, current_user.id)
    return [_to_out(r, counts.get(r.id, 0)) for r in load_categories(db, current_user.id)]


@router.put("/order")
def reorder_categories(
    payload: CategoryReorder,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    for index, category_id in enumerate(payload.orderedIds):
        # Ids the caller does not own are skipped by the user_id guard.
        db.execute(
            update(Category)
            .where(Category.id == category_id, Category.user_id == current_user.id)
            .values(order=index + 1)
        )
    db.commit()
    return {"ok": True}


@router.patch("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: str,
    payload: CategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CategoryOut:
    row = get_owned_category(db, current_user, category_id)
    fields = payload.model_fields_set

    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise HTTPException(status_code=400, detail="Category name is required")
        row.name = name
    if "icon" in fields:
        row.icon = payload.icon or None
    if "budget" in fields:
        row.budget = payload.budget
    if payload.order is not None:
        row.order = payload.order

    db.add(row)
    _commit_unique_name(db)
    db.refresh(row)

    return _to_out(row, _item_counts(db, current_user.id).get(row.id, 0))


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    row = get_owned_category(db, current_user, category_id)

    # Items survive as uncategorized.
    db.execute(
        update(Item)
        .where(Item.user_id == current_user.id, Item.category_id == row.id)
        .values(category_id=None)
    )
    db.delete(row)
    db.commit()

    logger.info("Category deleted", extra={"user_id": current_user.id, "category_id": category_id})
    return {"ok": True}
