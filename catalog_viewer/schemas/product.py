"""Product schemas for request/response validation."""

import enum
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

UNKNOWN_BRAND = "Unknown"

# Field length limits shared by the schemas and the validation engine
PRODUCT_NAME_MAX_LENGTH = 96
BRAND_MAX_LENGTH = 64
MODEL_MAX_LENGTH = 32
RETAILER_MAX_LENGTH = 64

# Server column is NUMERIC(32, 2)
PRICE_MAX_INTEGER_DIGITS = 30


class Product(BaseModel):
    """Product record as exchanged with the catalog API."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    product_key: int = Field(..., gt=0, alias="productKey")
    product_name: str = Field(
        ..., min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH, alias="productName"
    )
    brand: Optional[str] = Field(None, max_length=BRAND_MAX_LENGTH)
    model: Optional[str] = Field(None, max_length=MODEL_MAX_LENGTH)
    retailer: Optional[str] = Field(None, max_length=RETAILER_MAX_LENGTH)
    price: Decimal = Field(..., ge=0)
    product_description: Optional[str] = Field(None, alias="productDescription")

    @field_validator("price", mode="before")
    @classmethod
    def coerce_float_price(cls, value: Any) -> Any:
        """Convert floats through their repr so 9.99 stays Decimal('9.99')."""
        if isinstance(value, float):
            return Decimal(str(value))
        return value

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> str:
        """Send the exact decimal in plain notation, never a float."""
        return format(price, "f")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON body expected by the API."""
        return self.model_dump(mode="json", by_alias=True)

    def __repr__(self):
        """String representation of Product."""
        return f"<Product(key={self.product_key}, name='{self.product_name}', brand='{self.brand}')>"


class ProductDraft(BaseModel):
    """
    Unvalidated, user-edited candidate product.

    Every field holds raw text as typed into a form. Numbers passed
    programmatically are coerced to text so the validation engine always
    sees the same shape.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_key: str = Field("", alias="productKey")
    product_name: str = Field("", alias="productName")
    brand: str = ""
    model: str = ""
    retailer: str = ""
    price: str = ""
    product_description: str = Field("", alias="productDescription")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @classmethod
    def from_product(cls, product: Product) -> "ProductDraft":
        """Pre-fill a draft from an existing product (edit form)."""
        return cls(
            product_key=product.product_key,
            product_name=product.product_name,
            brand=product.brand,
            model=product.model,
            retailer=product.retailer,
            price=product.price,
            product_description=product.product_description,
        )

    def to_product(self) -> Product:
        """
        Convert to a Product.

        Only meaningful for a draft that passed validation; raises
        pydantic.ValidationError otherwise.

        Returns:
            Product with numeric key/price and blank optional fields as None
        """

        def optional(value: str) -> Optional[str]:
            return value if value.strip() else None

        return Product(
            product_key=int(Decimal(self.product_key.strip())),
            product_name=self.product_name,
            brand=optional(self.brand),
            model=optional(self.model),
            retailer=optional(self.retailer),
            price=Decimal(self.price.strip()),
            product_description=optional(self.product_description),
        )


class BrandAggregate(BaseModel):
    """Number of products sharing one brand."""

    brand: str = UNKNOWN_BRAND
    count: int = Field(..., ge=1)

    @field_validator("brand", mode="before")
    @classmethod
    def bucket_missing_brand(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return UNKNOWN_BRAND
        return value


class SearchField(str, enum.Enum):
    """Product field a search term is matched against."""

    NAME = "name"
    BRAND = "brand"


class SearchCriteria(BaseModel):
    """A single-field product search."""

    model_config = ConfigDict(frozen=True)

    field: SearchField = SearchField.NAME
    term: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.term.strip()

    def to_params(self) -> Dict[str, str]:
        """Query parameters for the search endpoint (exactly one key)."""
        return {self.field.value: self.term}
