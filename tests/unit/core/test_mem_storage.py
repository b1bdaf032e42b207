"""Tests for the in-memory entity store."""

import threading

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.shopease.core.errors import ReferentialError
from src.shopease.core.storage import SAMPLE_PRODUCTS, MemStorage
from src.shopease.entities import InsertOrder, InsertProduct, InsertUser, ProductUpdate


def _product(name: str = "Mouse", price: str = "19.99") -> InsertProduct:
    return InsertProduct(
        name=name, price=price, image="https://x/y.png", description="wireless mouse"
    )


def _order(product_id: int = 1, notes: str | None = None, **overrides) -> InsertOrder:
    fields = {
        "product_id": product_id,
        "customer_name": "Priya Sharma",
        "customer_email": "priya.sharma@gmail.com",
        "customer_phone": "9876543210",
        "customer_address": "221B Baker Street, London",
        "total_amount": "299.99",
        **overrides,
    }
    if notes is not None:
        fields["notes"] = notes
    return InsertOrder(**fields)


class TestSeedCatalog:
    def test_fresh_store_has_five_sample_products(self, storage):
        products = storage.get_all_products()

        assert [p.id for p in products] == [1, 2, 3, 4, 5]
        assert [p.name for p in products] == [p.name for p in SAMPLE_PRODUCTS]
        assert products[0].price == "299.99"

    def test_seeding_can_be_disabled(self, empty_storage):
        assert empty_storage.get_all_products() == []
        assert empty_storage.create_product(_product()).id == 1

    def test_stores_do_not_share_state(self):
        first, second = MemStorage(), MemStorage()

        first.create_product(_product())
        first.delete_product(1)

        assert second.count_products() == 5
        assert second.get_product(1) is not None


class TestProducts:
    def test_create_assigns_next_id(self, storage):
        product = storage.create_product(_product())

        assert product.id == 6
        assert product.model_dump() == {
            "id": 6,
            "name": "Mouse",
            "price": "19.99",
            "image": "https://x/y.png",
            "description": "wireless mouse",
        }
        assert storage.get_product(6) == product

    def test_ids_strictly_increase(self, storage):
        seen = [p.id for p in storage.get_all_products()]

        for index in range(5):
            created = storage.create_product(_product(name=f"Item {index}"))
            assert created.id > max(seen)
            seen.append(created.id)

    def test_get_unknown_product(self, storage):
        assert storage.get_product(999) is None

    def test_list_keeps_insertion_order(self, empty_storage):
        for name in ("b", "a", "c"):
            empty_storage.create_product(_product(name=name))

        assert [p.name for p in empty_storage.get_all_products()] == ["b", "a", "c"]

    def test_update_merges_partial_fields(self, storage):
        before = storage.get_product(1)

        updated = storage.update_product(1, ProductUpdate(price="249.99"))

        assert updated is not None
        assert updated.id == 1
        assert updated.price == "249.99"
        assert updated.name == before.name
        assert updated.image == before.image
        assert updated.description == before.description
        assert storage.get_product(1) == updated

    def test_empty_update_returns_record_unchanged(self, storage):
        before = storage.get_product(3)

        assert storage.update_product(3, ProductUpdate()) == before

    def test_update_unknown_id_inserts_nothing(self, storage):
        before = storage.get_all_products()

        assert storage.update_product(999, ProductUpdate(name="Ghost")) is None
        assert storage.get_all_products() == before
        assert storage.get_product(999) is None

    def test_update_does_not_touch_previously_returned_objects(self, storage):
        original = storage.get_product(1)

        storage.update_product(1, ProductUpdate(name="Renamed"))

        assert original.name == "Premium Wireless Headphones"

    def test_returned_products_are_immutable(self, storage):
        product = storage.get_product(1)

        with pytest.raises(PydanticValidationError):
            product.name = "Hacked"

        assert storage.get_product(1).name == "Premium Wireless Headphones"

    def test_delete_then_delete_again(self, storage):
        assert storage.delete_product(2) is True
        assert storage.delete_product(2) is False
        assert storage.get_product(2) is None

    def test_deleted_id_is_never_reused(self, storage):
        storage.delete_product(5)

        created = storage.create_product(_product())

        assert created.id == 6
        assert storage.get_product(5) is None

    def test_deleting_newest_product_does_not_rewind_ids(self, storage):
        newest = storage.create_product(_product())
        storage.delete_product(newest.id)

        assert storage.create_product(_product()).id == newest.id + 1


class TestOrders:
    def test_round_trip(self, storage):
        fields = _order(product_id=2, notes="Ring the bell")

        created = storage.create_order(fields)

        assert storage.get_order(created.id).model_dump() == {
            **fields.model_dump(),
            "id": created.id,
        }

    def test_omitted_notes_become_none(self, storage):
        created = storage.create_order(_order())

        assert created.notes is None
        assert "notes" in created.model_dump()

    def test_ids_start_at_one(self, storage):
        assert storage.create_order(_order()).id == 1
        assert storage.create_order(_order()).id == 2

    def test_orphan_orders_are_accepted_by_default(self, storage):
        order = storage.create_order(_order(product_id=999))

        assert order.product_id == 999

    def test_strict_mode_rejects_unknown_product(self):
        strict = MemStorage(enforce_product_reference=True)

        with pytest.raises(ReferentialError):
            strict.create_order(_order(product_id=999))

        assert strict.get_all_orders() == []
        assert strict.create_order(_order(product_id=1)).id == 1

    def test_get_all_and_unknown(self, storage):
        first = storage.create_order(_order())
        second = storage.create_order(_order(product_id=3))

        assert storage.get_all_orders() == [first, second]
        assert storage.get_order(42) is None
        assert storage.count_orders() == 2


class TestUsers:
    def test_create_and_lookup(self, storage):
        user = storage.create_user(InsertUser(username="admin", password="hunter2"))

        assert user.id == 1
        assert storage.get_user(1) == user
        assert storage.get_user_by_username("admin") == user

    def test_lookup_by_username_returns_first_match(self, storage):
        first = storage.create_user(InsertUser(username="sam", password="a"))
        storage.create_user(InsertUser(username="sam", password="b"))

        assert storage.get_user_by_username("sam") == first

    def test_unknown_user(self, storage):
        assert storage.get_user(1) is None
        assert storage.get_user_by_username("nobody") is None


class TestConcurrency:
    def test_parallel_creates_get_unique_ids(self, empty_storage):
        created = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                product = empty_storage.create_product(_product())
                with lock:
                    created.append(product.id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(created) == list(range(1, 401))
        assert empty_storage.count_products() == 400
