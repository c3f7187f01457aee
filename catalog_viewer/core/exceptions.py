"""
Catalog client exceptions.

Every failure of a remote call is raised as one of these classified
exceptions so callers never have to inspect transport-level errors.
"""

import enum
from typing import Any, Optional


class ErrorKind(str, enum.Enum):
    """Error classification."""

    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNREACHABLE = "unreachable"
    UNKNOWN = "unknown"


class CatalogError(Exception):
    """Base exception for all catalog client errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message = "Unexpected error while talking to the catalog server"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        detail: Any = None,
    ):
        """
        Initialize catalog error.

        Args:
            message: Human-readable error message
            status_code: HTTP status code, when the server responded
            detail: Structured error body returned by the server, if any
        """
        self.message = message or self.default_message
        super().__init__(self.message)
        self.status_code = status_code
        self.detail = detail

    def __repr__(self):
        return f"<{self.__class__.__name__}(status_code={self.status_code}, message='{self.message}')>"


class InvalidInputError(CatalogError):
    """Raised when a payload is rejected locally or by the server (HTTP 400)."""

    kind = ErrorKind.INVALID_INPUT
    default_message = "Invalid product data"


class ConflictError(CatalogError):
    """Raised when a product key already exists (HTTP 409)."""

    kind = ErrorKind.CONFLICT
    default_message = "Product key already exists"


class NotFoundError(CatalogError):
    """Raised when a product does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Product not found"


class UnreachableError(CatalogError):
    """Raised when the server could not be reached at all."""

    kind = ErrorKind.UNREACHABLE
    default_message = "Catalog server is unreachable"


class UnknownError(CatalogError):
    """Raised for any failure that fits no other classification."""

    kind = ErrorKind.UNKNOWN


STATUS_ERRORS = {
    400: InvalidInputError,
    404: NotFoundError,
}

# Only a create can collide with an existing product key
CREATE_STATUS_ERRORS = {**STATUS_ERRORS, 409: ConflictError}
