"""Pydantic schemas for Catalog Viewer."""

from .product import (
    UNKNOWN_BRAND,
    BrandAggregate,
    Product,
    ProductDraft,
    SearchCriteria,
    SearchField,
)

__all__ = [
    "UNKNOWN_BRAND",
    "BrandAggregate",
    "Product",
    "ProductDraft",
    "SearchCriteria",
    "SearchField",
]
