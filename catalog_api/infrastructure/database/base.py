"""SQLAlchemy ORM base and model registry."""

from sqlalchemy import BigInteger, Integer, MetaData
from sqlalchemy.orm import DeclarativeBase

# Deterministic constraint/index names across SQLite and PostgreSQL
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# BIGINT on PostgreSQL; SQLite needs plain INTEGER to keep the rowid alias
BigIntId = BigInteger().with_variant(Integer, "sqlite")

# Largest value a signed 64-bit primary key can hold
MAX_ROW_ID = 2**63 - 1


def is_storable_id(entity_id: int) -> bool:
    """True when ``entity_id`` fits the primary key column.

    Anything outside that range cannot exist in storage, so lookups can
    answer "absent" without sending an unbindable value to the driver.
    """
    return 1 <= entity_id <= MAX_ROW_ID


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (``articles``, ``products``)."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
