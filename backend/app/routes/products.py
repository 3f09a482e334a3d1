"""
Product catalog API routes.
"""
from fastapi import APIRouter, Depends

from app.models.product import CatalogResult
from app.services import database
from app.services.catalog import CatalogService
from app.services.product_store import ProductStore

router = APIRouter()


def get_catalog_service() -> CatalogService:
    """Wire store -> service against the current session factory."""
    return CatalogService(ProductStore(database.async_session))


@router.get("/products", response_model=CatalogResult)
async def get_products(service: CatalogService = Depends(get_catalog_service)):
    """Catalog with its total count. Backend errors fall through to the default 500."""
    return await service.get_catalog()
