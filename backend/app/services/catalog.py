"""
Catalog aggregation: count + product list in one result.
"""
from app.models.product import CatalogResult
from app.services.product_store import ProductSource


class CatalogService:
    def __init__(self, store: ProductSource):
        self._store = store

    async def get_catalog(self) -> CatalogResult:
        """Query the store twice and combine the answers. Errors propagate as-is."""
        count = await self._store.count()
        products = await self._store.list()
        return CatalogResult(count=count, products=products)
