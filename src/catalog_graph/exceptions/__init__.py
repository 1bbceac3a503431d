"""Exception hierarchy for catalog-graph."""

from .base import CatalogError
from .config import ConfigurationError, InvalidConfigError
from .query import QueryError, SchemaValidationError
from .store import (
    InvalidRecordError,
    StoreError,
    StoreUnavailable,
    UniquenessViolation,
    UnknownFieldError,
)

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "InvalidConfigError",
    "StoreError",
    "StoreUnavailable",
    "UniquenessViolation",
    "InvalidRecordError",
    "UnknownFieldError",
    "QueryError",
    "SchemaValidationError",
]
