"""
Pydantic models for products.
"""
from typing import List, Optional

from pydantic import BaseModel


class Product(BaseModel):
    id: Optional[int]
    name: Optional[str]
    price: Optional[float]


class CatalogResult(BaseModel):
    """Response payload for GET /products"""
    count: int
    products: List[Product]
