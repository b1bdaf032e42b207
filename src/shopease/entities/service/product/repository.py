from loguru import logger

from src.shopease.entities.core._base import EntityTable

from .entity import Product
from .schemas import InsertProduct, ProductUpdate


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, table: EntityTable[Product]) -> None:
        self._table = table

    def create(self, fields: InsertProduct) -> Product:
        product = self._table.insert(
            lambda product_id: Product(id=product_id, **fields.model_dump())
        )
        logger.info(f"Created product {product.id}")
        return product

    def get(self, product_id: int) -> Product | None:
        return self._table.get(product_id)

    def list_all(self) -> list[Product]:
        return self._table.all()

    def update(self, product_id: int, update: ProductUpdate) -> Product | None:
        changes = update.changes()
        updated = self._table.replace(
            product_id, lambda existing: existing.model_copy(update=changes)
        )
        if updated is not None:
            logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return updated

    def delete(self, product_id: int) -> bool:
        deleted = self._table.delete(product_id)
        if deleted:
            logger.info(f"Deleted product {product_id}")
        return deleted

    def count(self) -> int:
        return len(self._table)
