"""Entity store contract and its in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger

from src.shopease.core.errors import ReferentialError
from src.shopease.entities.core._base import EntityTable
from src.shopease.entities.core.user import InsertUser, User, UserRepository
from src.shopease.entities.service.order import InsertOrder, Order, OrderRepository
from src.shopease.entities.service.product import (
    InsertProduct,
    Product,
    ProductRepository,
    ProductUpdate,
)

from .seed import SAMPLE_PRODUCTS


class Storage(ABC):
    """Authoritative source of users, products and orders.

    Every method takes already-validated input; validation belongs to the
    schemas. Missing records are reported as ``None`` (or ``False`` for
    deletes) rather than raised.
    """

    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def create_user(self, fields: InsertUser) -> User: ...

    @abstractmethod
    def get_all_products(self) -> list[Product]: ...

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None: ...

    @abstractmethod
    def create_product(self, fields: InsertProduct) -> Product: ...

    @abstractmethod
    def update_product(
        self, product_id: int, update: ProductUpdate
    ) -> Product | None: ...

    @abstractmethod
    def delete_product(self, product_id: int) -> bool: ...

    @abstractmethod
    def create_order(self, fields: InsertOrder) -> Order: ...

    @abstractmethod
    def get_all_orders(self) -> list[Order]: ...

    @abstractmethod
    def get_order(self, order_id: int) -> Order | None: ...

    def count_products(self) -> int:
        return len(self.get_all_products())

    def count_orders(self) -> int:
        return len(self.get_all_orders())


class MemStorage(Storage):
    """Process-memory store, one ``EntityTable`` per entity family.

    Nothing survives a restart. Unless ``seed_catalog`` is False the catalog
    starts with the five sample products, ids 1 to 5.

    Orders are accepted for any ``product_id`` unless
    ``enforce_product_reference`` is set, in which case an unknown product
    raises ``ReferentialError``.
    """

    def __init__(
        self, seed_catalog: bool = True, enforce_product_reference: bool = False
    ) -> None:
        self.enforce_product_reference = enforce_product_reference
        self.users = UserRepository(EntityTable[User]("users"))
        self.products = ProductRepository(EntityTable[Product]("products"))
        self.orders = OrderRepository(EntityTable[Order]("orders"))

        if seed_catalog:
            for product in SAMPLE_PRODUCTS:
                self.products.create(product)
            logger.info(f"Seeded catalog with {len(SAMPLE_PRODUCTS)} products")

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.get_by_username(username)

    def create_user(self, fields: InsertUser) -> User:
        return self.users.create(fields)

    def get_all_products(self) -> list[Product]:
        return self.products.list_all()

    def get_product(self, product_id: int) -> Product | None:
        return self.products.get(product_id)

    def create_product(self, fields: InsertProduct) -> Product:
        return self.products.create(fields)

    def update_product(self, product_id: int, update: ProductUpdate) -> Product | None:
        return self.products.update(product_id, update)

    def delete_product(self, product_id: int) -> bool:
        return self.products.delete(product_id)

    def create_order(self, fields: InsertOrder) -> Order:
        if self.enforce_product_reference and self.get_product(fields.product_id) is None:
            raise ReferentialError(f"Product {fields.product_id} does not exist")
        return self.orders.create(fields)

    def get_all_orders(self) -> list[Order]:
        return self.orders.list_all()

    def get_order(self, order_id: int) -> Order | None:
        return self.orders.get(order_id)

    def count_products(self) -> int:
        return self.products.count()

    def count_orders(self) -> int:
        return self.orders.count()
