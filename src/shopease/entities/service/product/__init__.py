"""Entity package: Product."""

from .entity import Product
from .repository import ProductRepository
from .schemas import (
    InsertProduct,
    ProductUpdate,
    validate_insert_product,
    validate_partial_product,
)

__all__ = [
    "Product",
    "ProductRepository",
    "InsertProduct",
    "ProductUpdate",
    "validate_insert_product",
    "validate_partial_product",
]
