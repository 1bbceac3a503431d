"""Populate a store with a demo user and fake catalog data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from faker import Faker

from ..exceptions import UniquenessViolation
from ..logging_config import get_logger
from ..store.database import DocumentStore
from ..store.models import Category, Order, Product, User

logger = get_logger(__name__)

DEMO_EMAIL = "demo@aa.io"
DEMO_PASSWORD = "password"

CATEGORY_COUNT = 10
PRODUCT_COUNT = 30
ORDER_COUNT = 5
MAX_PRODUCTS_PER_ORDER = 10


@dataclass
class SeedSummary:
    """Records created and duplicates skipped, keyed by entity name."""

    created: dict[str, int] = field(
        default_factory=lambda: {"User": 0, "Category": 0, "Product": 0, "Order": 0}
    )
    skipped: dict[str, int] = field(
        default_factory=lambda: {"User": 0, "Category": 0, "Product": 0, "Order": 0}
    )

    @property
    def total_created(self) -> int:
        return sum(self.created.values())


def seed_database(store: DocumentStore, fake: Optional[Faker] = None) -> SeedSummary:
    """Insert the demo user, categories, products and orders.

    Categories and products get random names, so collisions with existing
    records happen; each duplicate is logged and skipped. Orders reference
    randomly chosen products and may list the same product more than once.

    Args:
        store: A connected store
        fake: Faker instance to draw values from (seed it for repeatable
            data); a fresh one is created if omitted

    Returns:
        Counts of created and skipped records
    """
    fake = fake or Faker()
    summary = SeedSummary()

    user = _seed_user(store, summary)

    categories: list[Category] = []
    for _ in range(CATEGORY_COUNT):
        try:
            categories.append(store.insert(Category(name=fake.word().title())))
            summary.created["Category"] += 1
        except UniquenessViolation as e:
            logger.warning("Duplicate category: %s", e.value)
            summary.skipped["Category"] += 1

    products: list[Product] = []
    for _ in range(PRODUCT_COUNT):
        category = fake.random_element(categories) if categories else None
        product = Product(
            name=f"{fake.color_name()} {fake.word()}",
            description=fake.sentence(),
            price=fake.random_int(min=1, max=10000) / 100,
            category=category.id if category else None,
        )
        try:
            products.append(store.insert(product))
            summary.created["Product"] += 1
        except UniquenessViolation as e:
            logger.warning("Duplicate product: %s", e.value)
            summary.skipped["Product"] += 1

    if not products:
        logger.warning("No products saved, skipping orders")
        return summary

    for _ in range(ORDER_COUNT):
        picks = fake.random_int(min=1, max=MAX_PRODUCTS_PER_ORDER)
        order_products = [fake.random_element(products).id for _ in range(picks)]
        store.insert(Order(user=user.id, products=order_products))
        summary.created["Order"] += 1

    logger.info("Successfully seeded database (%d records)", summary.total_created)
    return summary


def _seed_user(store: DocumentStore, summary: SeedSummary) -> User:
    try:
        user = store.insert(User(email=DEMO_EMAIL, password=DEMO_PASSWORD))
        summary.created["User"] += 1
        return user
    except UniquenessViolation:
        existing = store.find_where(User, "email", DEMO_EMAIL)[0]
        logger.info("Demo user %s already exists, reusing it", DEMO_EMAIL)
        summary.skipped["User"] += 1
        return existing
