"""GraphQL schema for the catalog.

Printed, the schema reads::

    type User { _id: ID!  email: String!  orders: [Order] }
    type Product { _id: ID!  name: String!  description: String  category: Category }
    type Category { _id: ID!  name: String!  products: [Product] }
    type Order { _id: ID!  user: User  products: [Product] }
    type Query { categories: [Category] }

Every object type keeps the store record it was built from in a private
attribute; relationship fields hand that record to the matching function in
:mod:`catalog_graph.graph.resolvers`. The store handle comes from the
execution context under the ``"store"`` key.
"""

from typing import Optional

import strawberry
from strawberry.types import Info

from ..store.database import DocumentStore
from ..store.models import Category, Order, Product, User
from . import resolvers


def _store(info: Info) -> DocumentStore:
    return info.context["store"]


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID = strawberry.field(name="_id")
    email: str
    record: strawberry.Private[User]

    @classmethod
    def from_record(cls, record: User) -> "UserType":
        return cls(id=strawberry.ID(record.id), email=record.email, record=record)

    @strawberry.field
    def orders(self, info: Info) -> Optional[list[Optional["OrderType"]]]:
        orders = resolvers.user_orders(_store(info), self.record)
        return [OrderType.from_record(order) for order in orders]


@strawberry.type(name="Product")
class ProductType:
    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    description: Optional[str]
    record: strawberry.Private[Product]

    @classmethod
    def from_record(cls, record: Product) -> "ProductType":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            description=record.description,
            record=record,
        )

    @strawberry.field
    def category(self, info: Info) -> Optional["CategoryType"]:
        category = resolvers.product_category(_store(info), self.record)
        if category is None:
            return None
        return CategoryType.from_record(category)


@strawberry.type(name="Category")
class CategoryType:
    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    record: strawberry.Private[Category]

    @classmethod
    def from_record(cls, record: Category) -> "CategoryType":
        return cls(id=strawberry.ID(record.id), name=record.name, record=record)

    @strawberry.field
    def products(self, info: Info) -> Optional[list[Optional[ProductType]]]:
        products = resolvers.category_products(_store(info), self.record)
        return [ProductType.from_record(product) for product in products]


@strawberry.type(name="Order")
class OrderType:
    id: strawberry.ID = strawberry.field(name="_id")
    record: strawberry.Private[Order]

    @classmethod
    def from_record(cls, record: Order) -> "OrderType":
        return cls(id=strawberry.ID(record.id), record=record)

    @strawberry.field
    def user(self, info: Info) -> Optional[UserType]:
        user = resolvers.order_user(_store(info), self.record)
        if user is None:
            return None
        return UserType.from_record(user)

    @strawberry.field
    def products(self, info: Info) -> Optional[list[Optional[ProductType]]]:
        products = resolvers.order_products(_store(info), self.record)
        return [ProductType.from_record(product) for product in products]


@strawberry.type
class Query:
    @strawberry.field
    def categories(self, info: Info) -> Optional[list[Optional[CategoryType]]]:
        return [CategoryType.from_record(c) for c in resolvers.all_categories(_store(info))]


# User and Order are not reachable from Query, so register them explicitly.
schema = strawberry.Schema(query=Query, types=[UserType, OrderType])
