"""
Relational backend access using SQLAlchemy async.

Provides:
- Async engine + session factory
- The `product` table definition
- Startup / shutdown helpers used by the app lifespan
"""
import os
import logging
from pathlib import Path

from sqlalchemy import Column, Float, Integer, String
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

log = logging.getLogger("database")

# ── Database path ──
# Default: backend/data/catalog.db
_backend_dir = Path(__file__).resolve().parent.parent.parent
_data_dir = _backend_dir / "data"
_data_dir.mkdir(exist_ok=True)

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{_data_dir / 'catalog.db'}",
)
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").strip().lower() in ("1", "true", "yes")

# ── Engine & Session ──

engine = create_async_engine(DATABASE_URL, echo=DATABASE_ECHO)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# ── Base ──

class Base(DeclarativeBase):
    pass


# ── ORM Models ──

class ProductRow(Base):
    """The catalog table. Owned by database provisioning; columns may be NULL."""
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    price = Column(Float, nullable=True)


# ── Lifecycle ──

async def init_db():
    """Create the product table if it is missing (idempotent)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info(f"Database ready: {engine.url.render_as_string(hide_password=True)}")


async def close_db():
    """Dispose engine on shutdown."""
    await engine.dispose()
