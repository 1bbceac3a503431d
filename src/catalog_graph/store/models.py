"""Record types held by the document store.

Each record type is paired with an :class:`EntitySpec` declaring which of its
fields are required, unique, or references to another entity. The store
builds its tables, indexes and insert-time checks from these declarations.

References are one-directional: ``Product.category``, ``Order.user`` and
``Order.products`` are stored; the reverse directions are derived at query
time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

FieldKind = Literal["text", "number", "ref", "refs"]


@dataclass
class User:
    email: str
    password: str
    id: Optional[str] = None


@dataclass
class Category:
    name: str
    id: Optional[str] = None


@dataclass
class Product:
    name: str
    price: float
    description: Optional[str] = None
    category: Optional[str] = None
    id: Optional[str] = None


@dataclass
class Order:
    user: Optional[str] = None
    products: list[str] = field(default_factory=list)
    id: Optional[str] = None


Record = Union[User, Category, Product, Order]


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one stored field.

    Attributes:
        name: Attribute name on the record type (also the column name)
        kind: Storage kind; ``ref`` holds one identity, ``refs`` a list
        required: Insert fails if the value is ``None``
        unique: Insert fails if another record holds the same value
        minimum: Lower bound for ``number`` fields
    """

    name: str
    kind: FieldKind = "text"
    required: bool = False
    unique: bool = False
    minimum: Optional[float] = None

    @property
    def queryable(self) -> bool:
        """Whether ``find_where`` can match on this field."""
        return self.kind != "refs"


@dataclass(frozen=True)
class EntitySpec:
    """Declaration of one record collection."""

    name: str
    table: str
    record_type: type
    fields: tuple[FieldSpec, ...]

    def get_field(self, name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


USER = EntitySpec(
    name="User",
    table="users",
    record_type=User,
    fields=(
        FieldSpec("email", required=True, unique=True),
        FieldSpec("password", required=True),
    ),
)

CATEGORY = EntitySpec(
    name="Category",
    table="categories",
    record_type=Category,
    fields=(FieldSpec("name", required=True, unique=True),),
)

PRODUCT = EntitySpec(
    name="Product",
    table="products",
    record_type=Product,
    fields=(
        FieldSpec("name", required=True, unique=True),
        FieldSpec("description"),
        FieldSpec("price", kind="number", required=True, minimum=0.0),
        FieldSpec("category", kind="ref"),
    ),
)

ORDER = EntitySpec(
    name="Order",
    table="orders",
    record_type=Order,
    fields=(
        FieldSpec("user", kind="ref"),
        FieldSpec("products", kind="refs"),
    ),
)

ENTITIES: dict[type, EntitySpec] = {
    User: USER,
    Category: CATEGORY,
    Product: PRODUCT,
    Order: ORDER,
}


def entity_spec(entity: type) -> EntitySpec:
    """Return the declaration for a record type.

    Raises:
        KeyError: If *entity* is not one of the stored record types
    """
    try:
        return ENTITIES[entity]
    except KeyError:
        raise KeyError(f"Not a stored record type: {entity!r}") from None
