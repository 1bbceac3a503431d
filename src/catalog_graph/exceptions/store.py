"""Store exceptions: connectivity, uniqueness, record validation."""

from typing import Any

from .base import CatalogError


class StoreError(CatalogError):
    """Base class for document store errors."""

    pass


class StoreUnavailable(StoreError):
    """Raised when the store cannot be reached or is not connected."""

    def __init__(self, uri: str, reason: str):
        super().__init__(
            f"Store unavailable: {uri}",
            details={"uri": uri, "reason": reason},
        )
        self.uri = uri
        self.reason = reason


class UniquenessViolation(StoreError):
    """Raised when an insert collides with a declared-unique field."""

    def __init__(self, entity: str, field: str, value: Any):
        super().__init__(
            f"Duplicate {entity}.{field}: {value}",
            details={"entity": entity, "field": field, "value": str(value)},
        )
        self.entity = entity
        self.field = field
        self.value = value


class InvalidRecordError(StoreError):
    """Raised when a record fails its required-field or value checks."""

    def __init__(self, entity: str, field: str, reason: str):
        super().__init__(
            f"Invalid {entity} record",
            details={"entity": entity, "field": field, "reason": reason},
        )
        self.entity = entity
        self.field = field
        self.reason = reason


class UnknownFieldError(StoreError):
    """Raised when a lookup names a field the entity cannot be queried by."""

    def __init__(self, entity: str, field: str):
        super().__init__(
            f"Cannot query {entity} by field: {field}",
            details={"entity": entity, "field": field},
        )
        self.entity = entity
        self.field = field
