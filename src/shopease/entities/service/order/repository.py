from loguru import logger

from src.shopease.entities.core._base import EntityTable

from .entity import Order
from .schemas import InsertOrder


class OrderRepository:
    """Data-access layer for orders."""

    def __init__(self, table: EntityTable[Order]) -> None:
        self._table = table

    def create(self, fields: InsertOrder) -> Order:
        # notes is always present on a stored order, None when omitted
        order = self._table.insert(
            lambda order_id: Order(id=order_id, **fields.model_dump())
        )
        logger.info(f"Created order {order.id} for product {order.product_id}")
        return order

    def get(self, order_id: int) -> Order | None:
        return self._table.get(order_id)

    def list_all(self) -> list[Order]:
        return self._table.all()

    def count(self) -> int:
        return len(self._table)
