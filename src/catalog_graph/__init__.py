"""
catalog-graph - GraphQL catalog/order demo service

Serves users, categories, products and orders from a document store
through a GraphQL schema, with a seeding command for fake data.
"""

__version__ = "0.1.0"

from .graph.execute import execute_query
from .graph.schema import schema
from .store.database import DocumentStore
from .store.models import Category, Order, Product, User

__all__ = [
    "schema",
    "execute_query",
    "DocumentStore",
    "User",
    "Category",
    "Product",
    "Order",
]
