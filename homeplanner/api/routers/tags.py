from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from homeplanner.api.deps import get_current_user, get_db
from homeplanner.core.logging_config import get_logger
from homeplanner.models.tag import Tag, item_tags
from homeplanner.models.user import User
from homeplanner.schemas.tag import TagCreate, TagOut, TagUpdate

router = APIRouter(prefix="/tags", tags=["tags"])

logger = get_logger(__name__)


def normalize_tag_name(value: str) -> str:
    return value.strip().lower()


def get_owned_tag(db: Session, current_user: User, tag_id: str) -> Tag:
    row = db.get(Tag, tag_id)
    if not row or row.user_id != current_user.id:
        raise HTTPException(status_code=404, detail="Tag not found")
    return row


def _commit_unique_name(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Tag already exists")


@router.get("", response_model=list[TagOut])
def list_tags(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[TagOut]:
    usage = (
        select(func.count())
        .select_from(item_tags)
        .where(item_tags.c.tag_id == Tag.id)
        .correlate(Tag)
        .scalar_subquery()
    )
    rows = db.execute(
        select(Tag, usage).where(Tag.user_id == current_user.id).order_by(Tag.name.asc())
    ).all()
    return [TagOut(id=t.id, name=t.name, color=t.color, itemCount=int(count or 0)) for t, count in rows]


@router.post("", response_model=TagOut)
def create_tag(
    payload: TagCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TagOut:
    name = normalize_tag_name(payload.name)
    if not name:
        raise HTTPException(status_code=400, detail="Tag name is required")

    row = Tag(user_id=current_user.id, name=name, color=payload.color or None)
    db.add(row)
    _commit_unique_name(db)
    db.refresh(row)

    logger.info("Tag created", extra={"user_id": current_user.id, "tag_id": row.id})
    return TagOut(id=row.id, name=row.name, color=row.color, itemCount=0)


@router.patch("/{tag_id}", response_model=TagOut)
def update_tag(
    tag_id: str,
    payload: TagUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TagOut:
    row = get_owned_tag(db, current_user, tag_id)

    if payload.name is not None:
        name = normalize_tag_name(payload.name)
        if not name:
            raise HTTPException(status_code=400, detail="Tag name is required")
        row.name = name
    if "color" in payload.model_fields_set:
        row.color = payload.color or None

    db.add(row)
    _commit_unique_name(db)
    db.refresh(row)

    item_count = db.scalar(select(func.count()).select_from(item_tags).where(item_tags.c.tag_id == row.id))
    return TagOut(id=row.id, name=row.name, color=row.color, itemCount=int(item_count or 0))


@router.delete("/{tag_id}")
def delete_tag(
    tag_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    row = get_owned_tag(db, current_user, tag_id)

    db.execute(item_tags.delete().where(item_tags.c.tag_id == row.id))
    db.delete(row)
    db.commit()
    return {"ok": True}
