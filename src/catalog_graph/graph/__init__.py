"""GraphQL layer: schema, relationship resolvers and the query runner."""

from .execute import execute_query
from .schema import CategoryType, OrderType, ProductType, Query, UserType, schema

__all__ = [
    "schema",
    "execute_query",
    "Query",
    "UserType",
    "ProductType",
    "CategoryType",
    "OrderType",
]
