"""Query exceptions: documents rejected before resolution."""

from typing import List

from .base import CatalogError


class QueryError(CatalogError):
    """Base class for GraphQL query errors."""

    pass


class SchemaValidationError(QueryError):
    """Raised when a query document fails parsing or schema validation."""

    def __init__(self, errors: List[str]):
        super().__init__(
            "Query rejected by schema validation",
            details={"errors": "; ".join(errors)},
        )
        self.errors = errors
