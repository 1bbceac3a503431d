"""Shared test fixtures for catalog-graph."""

import os
from dataclasses import dataclass, field

import pytest

from catalog_graph.store.database import DocumentStore
from catalog_graph.store.models import Category, Order, Product, User


@dataclass
class Catalog:
    """A small, fully linked data set."""

    user: User
    other_user: User
    tools: Category
    garden: Category
    empty: Category
    hammer: Product
    wrench: Product
    rake: Product
    loose: Product
    orders: list[Order] = field(default_factory=list)


class CountingStore(DocumentStore):
    """Store that records every lookup as ``(operation, entity name)``."""

    def __init__(self, uri: str) -> None:
        super().__init__(uri)
        self.calls: list[tuple[str, str]] = []

    def find_all(self, entity):
        self.calls.append(("find_all", entity.__name__))
        return super().find_all(entity)

    def find_where(self, entity, field_name, value):
        self.calls.append(("find_where", entity.__name__))
        return super().find_where(entity, field_name, value)

    def find_by_id(self, entity, identity):
        self.calls.append(("find_by_id", entity.__name__))
        return super().find_by_id(entity, identity)

    def find_many_by_ids(self, entity, identities):
        self.calls.append(("find_many_by_ids", entity.__name__))
        return super().find_many_by_ids(entity, identities)

    def lookups_of(self, entity_name: str) -> list[str]:
        return [op for op, name in self.calls if name == entity_name]


@pytest.fixture
def store():
    """An empty, connected in-memory store."""
    with DocumentStore("sqlite://:memory:") as s:
        yield s


@pytest.fixture
def counting_store():
    with CountingStore(":memory:") as s:
        yield s


def populate(store: DocumentStore) -> Catalog:
    user = store.insert(User(email="demo@aa.io", password="password"))
    other_user = store.insert(User(email="other@aa.io", password="secret"))
    tools = store.insert(Category(name="Tools"))
    garden = store.insert(Category(name="Garden"))
    empty = store.insert(Category(name="Empty"))
    hammer = store.insert(Product(name="Hammer", price=12.5, description="Claw", category=tools.id))
    wrench = store.insert(Product(name="Wrench", price=8.0, category=tools.id))
    rake = store.insert(Product(name="Rake", price=20.0, category=garden.id))
    loose = store.insert(Product(name="Loose", price=1.0))
    catalog = Catalog(
        user=user,
        other_user=other_user,
        tools=tools,
        garden=garden,
        empty=empty,
        hammer=hammer,
        wrench=wrench,
        rake=rake,
        loose=loose,
    )
    catalog.orders.append(store.insert(Order(user=user.id, products=[hammer.id, rake.id])))
    catalog.orders.append(
        store.insert(Order(user=user.id, products=[wrench.id, wrench.id, hammer.id]))
    )
    return catalog


@pytest.fixture
def catalog(store) -> Catalog:
    return populate(store)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep config discovery away from the developer's environment."""
    for key in ("PORT", "MONGO_URI", "DATABASE_URI"):
        monkeypatch.delenv(key, raising=False)
    for key in list(os.environ):
        if key.startswith("CATALOG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
