from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from homeplanner.core.config import settings
from homeplanner.core.security import decode_session_token
from homeplanner.db.session import SessionLocal
from homeplanner.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _read_token(request: Request, cred: HTTPAuthorizationCredentials | None) -> str | None:
    if cred and cred.credentials:
        return cred.credentials
    return request.cookies.get(settings.auth_cookie_name)


def _resolve_user(db: Session, token: str) -> User | None:
    try:
        user_id = decode_session_token(token)
    except (JWTError, ValueError):
        return None

    user = db.get(User, user_id)
    if not user or not user.is_active:
        return None
    return user


def get_current_user(
    request: Request,
    cred: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    token = _read_token(request, cred)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user = _resolve_user(db, token)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    return user


def get_current_user_id(
    request: Request,
    cred: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> str | None:
    """Like ``get_current_user`` but yields ``None`` for anonymous callers."""

    token = _read_token(request, cred)
    if not token:
        return None
    user = _resolve_user(db, token)
    return user.id if user else None
