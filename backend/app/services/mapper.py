"""
Row mapping: one `product` row -> one Product.
"""
from typing import Any, Mapping

from pydantic import ValidationError

from app.errors import MappingError
from app.models.product import Product

PRODUCT_COLUMNS = ("id", "name", "price")


def map_product_row(row: Mapping[str, Any]) -> Product:
    """
    Copy the id, name and price columns of a row into a Product.

    Values go through pydantic's lax coercion (Decimal -> float etc.).
    NULL columns stay None. Columns other than the three above are ignored.

    Raises:
        MappingError: a column is missing or holds an incompatible value.
    """
    try:
        values = {column: row[column] for column in PRODUCT_COLUMNS}
    except KeyError as e:
        raise MappingError(f"Row is missing a product column: {e}") from e

    try:
        return Product(**values)
    except ValidationError as e:
        raise MappingError(f"Row cannot be mapped to a Product: {values!r}") from e
