from __future__ import annotations

from uuid import uuid4

from sqlalchemy import MetaData, Numeric
from sqlalchemy.orm import DeclarativeBase

# Money is stored as fixed-point and read back as Decimal.
Money = Numeric(12, 2, asdecimal=True)

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


def generate_id() -> str:
    return uuid4().hex


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
