"""Entity package: Order."""

from .entity import Order
from .repository import OrderRepository
from .schemas import InsertOrder, validate_insert_order

__all__ = ["Order", "OrderRepository", "InsertOrder", "validate_insert_order"]
