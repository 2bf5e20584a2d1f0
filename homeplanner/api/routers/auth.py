from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import select
from sqlalchemy.orm import Session

from homeplanner.api.deps import get_current_user, get_db
from homeplanner.core.config import settings
from homeplanner.core.datetime_utils import as_utc
from homeplanner.core.logging_config import get_logger
from homeplanner.core.security import create_session_token, hash_password, verify_password
from homeplanner.db.init_db import seed_default_categories
from homeplanner.models.user import User
from homeplanner.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserMe

router = APIRouter(prefix="/auth", tags=["auth"])

logger = get_logger(__name__)


def _user_out(user: User) -> UserMe:
    return UserMe(id=user.id, email=user.email, createdAt=as_utc(user.created_at))


@router.post("/register", response_model=UserMe)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> UserMe:
    existing = db.scalar(select(User).where(User.email == payload.email))
    if existing:
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(email=payload.email, password_hash=hash_password(payload.password))
    db.add(user)
    db.flush()
    seed_default_categories(db, user.id)
    db.commit()
    db.refresh(user)

    logger.info("User registered", extra={"user_id": user.id})
    return _user_out(user)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, response: Response, db: Session = Depends(get_db)) -> TokenResponse:
    user = db.scalar(select(User).where(User.email == payload.email.strip().lower()))
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not verify_password(payload.password, user.password_hash):
        logger.warning("Failed login", extra={"user_id": user.id})
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_session_token(user.id)

    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,
        secure=bool(settings.auth_cookie_secure),
        samesite=settings.auth_cookie_samesite,
        max_age=int(settings.jwt_expire_minutes) * 60,
        path="/",
    )

    return TokenResponse(access_token=token)


@router.post("/logout")
def logout(response: Response) -> dict:
    response.delete_cookie(key=settings.auth_cookie_name, path="/")
    return {"ok": True}


@router.get("/me", response_model=UserMe)
def me(current_user: User = Depends(get_current_user)) -> UserMe:
    return _user_out(current_user)
