"""Document store: record types and the SQLite-backed store client."""

from .database import DocumentStore, new_object_id, resolve_database_path
from .models import ENTITIES, Category, EntitySpec, FieldSpec, Order, Product, User, entity_spec

__all__ = [
    "DocumentStore",
    "new_object_id",
    "resolve_database_path",
    "User",
    "Category",
    "Product",
    "Order",
    "EntitySpec",
    "FieldSpec",
    "ENTITIES",
    "entity_spec",
]
