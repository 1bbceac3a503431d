"""Run query documents against a store without going through HTTP."""

from typing import Any, Optional

from ..exceptions import SchemaValidationError
from ..logging_config import get_logger
from ..store.database import DocumentStore
from .schema import schema

logger = get_logger(__name__)


def execute_query(
    store: DocumentStore,
    query: str,
    variables: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Execute *query* and return the standard ``data``/``errors`` response.

    Field-level failures come back as ``errors`` entries next to whatever
    ``data`` could be resolved.

    Raises:
        SchemaValidationError: If the document does not parse or names
            fields or types the schema does not declare. No resolver has run
            in that case.
    """
    result = schema.execute_sync(
        query,
        variable_values=variables,
        context_value={"store": store},
    )
    if result.data is None and result.errors:
        messages = [error.message for error in result.errors]
        logger.warning("Query rejected: %s", "; ".join(messages))
        raise SchemaValidationError(messages)

    response: dict[str, Any] = {"data": result.data}
    if result.errors:
        response["errors"] = [error.formatted for error in result.errors]
    return response
