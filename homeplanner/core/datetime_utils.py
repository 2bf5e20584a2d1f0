from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a UTC-naive datetime, the form every DateTime column stores."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc(dt: datetime | None) -> datetime | None:
    """Treat a DB-stored UTC-naive datetime as UTC-aware for API responses."""

    if dt is None:
        return None
    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc)
    return dt.replace(tzinfo=timezone.utc)
