from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Ensure `backend/` is on sys.path so `import app.*` works in tests.
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

# Settings are read at import time; keep the app off PostgreSQL and the LLM APIs.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["OPENAI_API_KEY"] = ""
os.environ["ANTHROPIC_API_KEY"] = ""


@pytest.fixture
def engine(tmp_path):
    return create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'travel.db'}", poolclass=NullPool)


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def client(engine, session_factory):
    from app import models  # noqa: F401
    from app.database import Base, get_db
    from app.main import app

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _create_schema():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    app.dependency_overrides[get_db] = _get_db
    try:
        with TestClient(app) as c:
            c.portal.call(_create_schema)
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_tour(client):
    def _make(**overrides):
        body = {
            "title": {"en": "Classic Uzbekistan Tour", "de": "Klassisches Usbekistan", "ru": "Классический Узбекистан"},
            "destination": "Samarkand",
            "price": 1200,
            "duration": 7,
        }
        body.update(overrides)
        r = client.post("/api/tours", json=body)
        assert r.status_code == 201, r.text
        return r.json()

    return _make
