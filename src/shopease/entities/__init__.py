"""Entities module with an entity-centric structure.

Each entity family has its own package containing:
- entity.py: Stored, immutable domain record
- schemas.py: Creation and update payload validation
- repository.py: Data access over the family's in-memory table
"""

from .core.user import InsertUser, User, UserRepository
from .service.order import InsertOrder, Order, OrderRepository
from .service.product import InsertProduct, Product, ProductRepository, ProductUpdate

__all__ = [
    "User",
    "InsertUser",
    "UserRepository",
    "Product",
    "InsertProduct",
    "ProductUpdate",
    "ProductRepository",
    "Order",
    "InsertOrder",
    "OrderRepository",
]
