"""Validation engine for product drafts."""

from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from pydantic import BaseModel, Field

from catalog_viewer.schemas.product import (
    BRAND_MAX_LENGTH,
    MODEL_MAX_LENGTH,
    PRICE_MAX_INTEGER_DIGITS,
    PRODUCT_NAME_MAX_LENGTH,
    RETAILER_MAX_LENGTH,
    ProductDraft,
)


class ValidationResult(BaseModel):
    """Outcome of validating a draft: field name -> error message."""

    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """All messages joined into one line."""
        return "; ".join(self.errors.values())


def _parse_number(raw: str) -> Optional[Decimal]:
    """Parse raw text as a finite number, or None if it is not one."""
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _check_product_key(raw: str) -> Optional[str]:
    if not raw.strip():
        return "Product Key is required"
    value = _parse_number(raw)
    if value is None or value <= 0 or value != value.to_integral_value():
        return "Product Key must be a positive number"
    return None


def _check_product_name(raw: str) -> Optional[str]:
    if not raw.strip():
        return "Product Name is required"
    if len(raw) > PRODUCT_NAME_MAX_LENGTH:
        return f"Product Name must be {PRODUCT_NAME_MAX_LENGTH} characters or less"
    return None


def _check_max_length(raw: str, label: str, limit: int) -> Optional[str]:
    if raw and len(raw) > limit:
        return f"{label} must be {limit} characters or less"
    return None


def _check_price(raw: str) -> Optional[str]:
    if not raw.strip():
        return "Price is required"
    value = _parse_number(raw)
    if value is None or value < 0:
        return "Price must be a non-negative number"
    if value.adjusted() >= PRICE_MAX_INTEGER_DIGITS:
        return f"Price must have at most {PRICE_MAX_INTEGER_DIGITS} digits before the decimal point"
    return None


def validate(draft: ProductDraft) -> ValidationResult:
    """
    Check a draft against the product field rules.

    Every rule runs independently so all violations are reported at once.

    Args:
        draft: Product draft as entered by the user

    Returns:
        ValidationResult; valid iff it carries no errors
    """
    checks = {
        "product_key": _check_product_key(draft.product_key),
        "product_name": _check_product_name(draft.product_name),
        "brand": _check_max_length(draft.brand, "Brand", BRAND_MAX_LENGTH),
        "model": _check_max_length(draft.model, "Model", MODEL_MAX_LENGTH),
        "retailer": _check_max_length(draft.retailer, "Retailer", RETAILER_MAX_LENGTH),
        "price": _check_price(draft.price),
    }
    return ValidationResult(
        errors={field: message for field, message in checks.items() if message}
    )
