"""Async engine, session factory and declarative base for the hosted PostgreSQL store."""

from collections.abc import AsyncGenerator
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import JSON, inspect
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

# JSONB on PostgreSQL, plain JSON elsewhere (local SQLite runs)
JSONType = JSON().with_variant(JSONB(), "postgresql")

UNDEFINED_TABLE = "42P01"

engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    def to_dict(self) -> dict:
        """Column values of this row as JSON-ready primitives."""
        data = {}
        for attr in inspect(self).mapper.column_attrs:
            value = getattr(self, attr.key)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            elif isinstance(value, Decimal):
                value = float(value)
            data[attr.key] = value
        return data


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        yield session


def is_missing_table(exc: DBAPIError) -> bool:
    """True when the store reports that the queried table does not exist."""
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == UNDEFINED_TABLE:
        return True
    return "no such table" in str(orig)
