"""
Error kinds raised by the catalog core.

The HTTP layer maps each kind to a status code; the core never
deals in status codes itself.
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """Base error with a machine-readable code and a human message."""

    error = "catalog_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(CatalogError):
    """Entity absent or soft-deleted."""

    error = "not_found"

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} with ID {identifier} not found",
            details={"resource": resource, "id": identifier},
        )


class ValidationFailure(CatalogError):
    """Input violates a business rule."""

    error = "validation_error"


class InfrastructureFailure(CatalogError):
    """Datastore unreachable or a query failed. Callers may retry."""

    error = "database_error"

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)
