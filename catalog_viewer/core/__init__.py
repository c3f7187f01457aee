"""Core building blocks shared across services."""

from .exceptions import (
    CatalogError,
    ConflictError,
    ErrorKind,
    InvalidInputError,
    NotFoundError,
    UnknownError,
    UnreachableError,
)

__all__ = [
    "CatalogError",
    "ConflictError",
    "ErrorKind",
    "InvalidInputError",
    "NotFoundError",
    "UnknownError",
    "UnreachableError",
]
