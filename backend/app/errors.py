"""
Error types raised by the catalog read path.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""
    pass


class QueryError(CatalogError):
    """A query against the product table failed (connectivity, syntax, permissions)."""
    pass


class MappingError(CatalogError):
    """A returned row could not be converted into a Product."""
    pass
