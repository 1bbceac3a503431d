"""Relationship resolvers for the catalog graph.

Each function takes the store handle and a parent record and returns the
related record(s). They hold no state and cache nothing, so every call issues
its own store lookup; a resolver that is never called never touches the
store.

A reference that points at a missing record is not an error: singular
lookups give ``None`` and plural lookups leave the entry out.
"""

from typing import Optional

from ..logging_config import get_logger
from ..store.database import DocumentStore
from ..store.models import Category, Order, Product, User

logger = get_logger(__name__)


def all_categories(store: DocumentStore) -> list[Category]:
    """Every category, in store order."""
    logger.debug("Resolving Query.categories")
    return store.find_all(Category)


def category_products(store: DocumentStore, category: Category) -> list[Product]:
    """Products whose category reference is *category*."""
    logger.debug("Resolving Category.products for %s", category.id)
    return store.find_where(Product, "category", category.id)


def user_orders(store: DocumentStore, user: User) -> list[Order]:
    """Orders placed by *user*."""
    logger.debug("Resolving User.orders for %s", user.id)
    return store.find_where(Order, "user", user.id)


def product_category(store: DocumentStore, product: Product) -> Optional[Category]:
    """The category *product* references, or ``None`` if unset or dangling."""
    logger.debug("Resolving Product.category for %s", product.id)
    if product.category is None:
        return None
    return store.find_by_id(Category, product.category)


def order_user(store: DocumentStore, order: Order) -> Optional[User]:
    """The user *order* references, or ``None`` if unset or dangling."""
    logger.debug("Resolving Order.user for %s", order.id)
    if order.user is None:
        return None
    return store.find_by_id(User, order.user)


def order_products(store: DocumentStore, order: Order) -> list[Product]:
    """One product per stored reference, duplicates kept, dangling dropped."""
    logger.debug("Resolving Order.products for %s", order.id)
    return store.find_many_by_ids(Product, order.products)
