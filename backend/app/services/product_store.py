"""
Read-only access to the `product` table.

Each operation opens its own session, so the count and the list never share
a transaction or snapshot.
"""
import logging
from typing import List, Protocol

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.errors import QueryError
from app.models.product import Product
from app.services.mapper import map_product_row

log = logging.getLogger("catalog")

COUNT_QUERY = text("SELECT COUNT(*) FROM product")
LIST_QUERY = text("SELECT * FROM product")


class ProductSource(Protocol):
    """Anything that can count and list the catalog."""

    async def count(self) -> int: ...

    async def list(self) -> List[Product]: ...


class ProductStore:
    """Runs the catalog queries against the relational backend."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def count(self) -> int:
        """Number of rows in the product table."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(COUNT_QUERY)
                total = result.scalar_one()
        except SQLAlchemyError as e:
            raise QueryError(f"Product count query failed: {e}") from e
        log.info(f"Product count: {total}")
        return int(total)

    async def list(self) -> List[Product]:
        """
        Every row of the product table, mapped to Products.

        Order is whatever the backend returns. A row that fails to map
        aborts the whole call.
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(LIST_QUERY)
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise QueryError(f"Product list query failed: {e}") from e
        products = [map_product_row(row) for row in rows]
        log.info(f"Listed {len(products)} products")
        return products
