from __future__ import annotations


class PlanningError(ValueError):
    """Caller asked the planning rules for something they do not support."""


class UnsupportedSortField(PlanningError):
    def __init__(self, field: str, allowed: tuple[str, ...]):
        self.field = field
        self.allowed = allowed
        super().__init__(f"Unsupported sort field {field!r}; expected one of: {', '.join(allowed)}")


class UnsupportedSortOrder(PlanningError):
    def __init__(self, order: str):
        self.order = order
        super().__init__(f"Unsupported sort order {order!r}; expected 'asc' or 'desc'")
