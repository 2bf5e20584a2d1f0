from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session

from homeplanner.api.deps import get_current_user, get_current_user_id, get_db
from homeplanner.core.config import settings
from homeplanner.models.item_suggestion import ItemSuggestion
from homeplanner.models.user import User
from homeplanner.schemas.suggestion import SuggestionCreate, SuggestionOut

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


def _visible_to(user_id: str | None):
    if user_id is None:
        return ItemSuggestion.is_system == True  # noqa: E712
    return or_(ItemSuggestion.is_system == True, ItemSuggestion.user_id == user_id)  # noqa: E712


def _to_out(row: ItemSuggestion) -> SuggestionOut:
    return SuggestionOut(
        id=row.id,
        name=row.name,
        categoryName=row.category_name,
        icon=row.icon,
        isSystem=row.is_system,
        usageCount=row.usage_count,
    )


@router.get("/search", response_model=list[SuggestionOut])
def search_suggestions(
    q: str = "",
    limit: int | None = None,
    db: Session = Depends(get_db),
    user_id: str | None = Depends(get_current_user_id),
) -> list[SuggestionOut]:
    term = q.strip().lower()
    if not term:
        return []

    if limit is None:
        limit = settings.suggestion_search_limit
    if limit < 1 or limit > 50:
        raise HTTPException(status_code=400, detail="Invalid limit")

    rows = db.scalars(
        select(ItemSuggestion)
        .where(_visible_to(user_id), func.lower(ItemSuggestion.name).contains(term, autoescape=True))
        .order_by(ItemSuggestion.usage_count.desc(), ItemSuggestion.name.asc())
        .limit(limit)
    ).all()
    return [_to_out(r) for r in rows]


@router.get("", response_model=list[SuggestionOut])
def list_suggestions(
    db: Session = Depends(get_db),
    user_id: str | None = Depends(get_current_user_id),
) -> list[SuggestionOut]:
    rows = db.scalars(
        select(ItemSuggestion)
        .where(_visible_to(user_id))
        .order_by(ItemSuggestion.category_name.asc(), ItemSuggestion.name.asc())
    ).all()
    return [_to_out(r) for r in rows]


@router.post("", response_model=SuggestionOut)
def create_suggestion(
    payload: SuggestionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionOut:
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Suggestion name is required")

    row = ItemSuggestion(
        name=name,
        category_name=payload.categoryName or None,
        icon=payload.icon or None,
        is_system=False,
        user_id=current_user.id,
        usage_count=0,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return _to_out(row)


@router.post("/{suggestion_id}/use", response_model=SuggestionOut)
def use_suggestion(
    suggestion_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionOut:
    row = db.scalar(
        select(ItemSuggestion).where(ItemSuggestion.id == suggestion_id, _visible_to(current_user.id))
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Suggestion not found")

    # Increment in SQL so concurrent uses are not lost.
    db.execute(
        update(ItemSuggestion)
        .where(ItemSuggestion.id == row.id)
        .values(usage_count=ItemSuggestion.usage_count + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    db.refresh(row)
    return _to_out(row)
