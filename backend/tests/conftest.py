"""
Shared fixtures for the test suite.

Key design decisions:
- Uses an in-memory SQLite DB per test (fast, isolated).
- Drives the ASGI app in-process through httpx (no real server).
"""
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Ensure env is loaded before anything else
from dotenv import load_dotenv

backend_dir = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=backend_dir / ".env", override=True)

# ── Fake product rows ──

WIDGET = {"id": 1, "name": "Widget", "price": 9.99}
GADGET = {"id": 2, "name": "Gadget", "price": 19.99}

FAKE_PRODUCTS = [WIDGET, GADGET]


# ── In-memory SQLite for tests ──


@pytest_asyncio.fixture(autouse=True)
async def reset_database():
    """
    Swap the DB engine to an in-memory SQLite before each test,
    create the product table, and tear down after.
    """
    from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
    from app.services import database as db_mod

    test_engine = create_async_engine("sqlite+aiosqlite://", echo=False)
    test_session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    # Monkey-patch the module
    original_engine = db_mod.engine
    original_session = db_mod.async_session
    db_mod.engine = test_engine
    db_mod.async_session = test_session_factory

    async with test_engine.begin() as conn:
        await conn.run_sync(db_mod.Base.metadata.create_all)

    yield

    # Teardown
    await test_engine.dispose()
    db_mod.engine = original_engine
    db_mod.async_session = original_session


@pytest.fixture
def session_factory():
    """The (monkey-patched) session factory for the current test."""
    from app.services import database as db_mod
    return db_mod.async_session


@pytest.fixture
def insert_products(session_factory):
    """Return a coroutine that inserts product rows into the test DB."""
    from app.services.database import ProductRow

    async def _insert(rows):
        async with session_factory() as session:
            async with session.begin():
                session.add_all([ProductRow(**row) for row in rows])

    return _insert


@pytest_asyncio.fixture
async def seeded_products(insert_products):
    """Widget + Gadget already in the product table."""
    await insert_products(FAKE_PRODUCTS)
    return FAKE_PRODUCTS


@pytest.fixture
def drop_product_table():
    """Return a coroutine that drops the product table, breaking every query."""
    from sqlalchemy import text
    from app.services import database as db_mod

    async def _drop():
        async with db_mod.engine.begin() as conn:
            await conn.execute(text("DROP TABLE product"))

    return _drop


# ── HTTP client ──


@pytest_asyncio.fixture
async def client():
    """In-process client for the FastAPI app. Unhandled errors surface as 500s."""
    from app.main import app

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()
