"""Tests for seeding.seed_database."""

import logging
import random

from faker import Faker

from catalog_graph.seeding import DEMO_EMAIL, seed_database
from catalog_graph.seeding import seeds
from catalog_graph.store.models import Category, Order, Product, User


def _fake(seed: int = 1234) -> Faker:
    fake = Faker()
    fake.seed_instance(seed)
    return fake


class _CollidingFaker:
    """Draws the same names every time, so repeated inserts collide."""

    def __init__(self) -> None:
        self._random = random.Random(0)

    def word(self) -> str:
        return "taken"

    def color_name(self) -> str:
        return "red"

    def sentence(self) -> str:
        return "Same again."

    def random_int(self, min: int = 0, max: int = 9999) -> int:
        return self._random.randint(min, max)

    def random_element(self, elements):
        return self._random.choice(list(elements))


class TestSeedDatabase:
    def test_counts(self, store):
        summary = seed_database(store, _fake())

        assert summary.created["User"] == 1
        assert summary.created["Category"] + summary.skipped["Category"] == seeds.CATEGORY_COUNT
        assert summary.created["Product"] + summary.skipped["Product"] == seeds.PRODUCT_COUNT
        assert summary.created["Order"] == seeds.ORDER_COUNT

        assert store.count(User) == 1
        assert store.count(Category) == summary.created["Category"]
        assert store.count(Product) == summary.created["Product"]
        assert store.count(Order) == seeds.ORDER_COUNT

    def test_demo_user(self, store):
        seed_database(store, _fake())
        users = store.find_where(User, "email", DEMO_EMAIL)
        assert len(users) == 1
        assert users[0].password == "password"

    def test_references_resolve(self, store):
        seed_database(store, _fake())
        category_ids = {c.id for c in store.find_all(Category)}
        product_ids = {p.id for p in store.find_all(Product)}
        user = store.find_where(User, "email", DEMO_EMAIL)[0]

        for product in store.find_all(Product):
            assert product.category in category_ids
            assert 0.01 <= product.price <= 100.0

        for order in store.find_all(Order):
            assert order.user == user.id
            assert 1 <= len(order.products) <= seeds.MAX_PRODUCTS_PER_ORDER
            assert set(order.products) <= product_ids

    def test_reseeding_skips_duplicates(self, store):
        seed_database(store, _fake(7))
        summary = seed_database(store, _fake(7))

        # Same seed draws the same names, so every category collides.
        assert summary.created["Category"] == 0
        assert summary.skipped["User"] == 1
        assert store.count(User) == 1

    def test_duplicates_logged(self, store, caplog):
        store.insert(Category(name="Taken"))

        with caplog.at_level(logging.WARNING, logger="catalog_graph"):
            summary = seed_database(store, _CollidingFaker())

        assert summary.created["Category"] == 0
        assert summary.skipped["Category"] == seeds.CATEGORY_COUNT
        assert "Duplicate category" in caplog.text

    def test_no_categories_leaves_products_uncategorised(self, store):
        store.insert(Category(name="Taken"))
        seed_database(store, _CollidingFaker())

        products = store.find_all(Product)
        assert [p.name for p in products] == ["red taken"]
        assert all(p.category is None for p in products)

    def test_no_products_skips_orders(self, store):
        store.insert(Category(name="Taken"))
        store.insert(Product(name="red taken", price=1.0))

        summary = seed_database(store, _CollidingFaker())

        assert summary.created["Product"] == 0
        assert summary.created["Order"] == 0
        assert store.count(Order) == 0
