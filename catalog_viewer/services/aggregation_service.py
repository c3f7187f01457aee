"""Brand aggregation and summary statistics."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional

from catalog_viewer.schemas.product import UNKNOWN_BRAND, BrandAggregate, Product


def _one_decimal(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def brand_key(brand: Optional[str]) -> str:
    """Bucket name for a product brand; blank or missing brands are Unknown."""
    if brand is None or not brand.strip():
        return UNKNOWN_BRAND
    return brand


def aggregate(products: Iterable[Product]) -> List[BrandAggregate]:
    """
    Group products by brand.

    Buckets are returned in the order their brand first appears in the
    input, which is what makes the most-popular tie-break stable.

    Args:
        products: Product collection

    Returns:
        One BrandAggregate per distinct brand
    """
    counts: Dict[str, int] = {}
    for product in products:
        key = brand_key(product.brand)
        counts[key] = counts.get(key, 0) + 1
    return [BrandAggregate(brand=brand, count=count) for brand, count in counts.items()]


class BrandStatistics:
    """
    Derived statistics over a list of brand buckets.

    Nothing is cached: every property is computed from the buckets on
    access.
    """

    def __init__(self, buckets: List[BrandAggregate], total_products: int):
        self.buckets = list(buckets)
        self.total_products = total_products

    @classmethod
    def from_products(cls, products: Iterable[Product]) -> "BrandStatistics":
        products = list(products)
        return cls(aggregate(products), len(products))

    @classmethod
    def from_summary(cls, buckets: Iterable[BrandAggregate]) -> "BrandStatistics":
        """Build from a server-side summary, where the total is the sum of counts."""
        buckets = list(buckets)
        return cls(buckets, sum(bucket.count for bucket in buckets))

    @property
    def total_brands(self) -> int:
        return len(self.buckets)

    def percentage(self, bucket: BrandAggregate) -> float:
        """Share of all products in this bucket, to one decimal place."""
        if self.total_products == 0:
            return 0
        return _one_decimal(bucket.count / self.total_products * 100)

    def relative_bar_width(self, bucket: BrandAggregate) -> float:
        """Bucket size relative to the largest bucket, 0-100."""
        if self.total_products == 0 or not self.buckets:
            return 0
        largest = max(b.count for b in self.buckets)
        return bucket.count / largest * 100

    @property
    def most_popular(self) -> Optional[BrandAggregate]:
        # max() keeps the first of equal elements
        if not self.buckets:
            return None
        return max(self.buckets, key=lambda bucket: bucket.count)

    @property
    def average_per_brand(self) -> float:
        if not self.buckets:
            return 0
        return _one_decimal(self.total_products / len(self.buckets))

    @property
    def singleton_brand_count(self) -> int:
        return sum(1 for bucket in self.buckets if bucket.count == 1)

    def percentage_of(self, brand: str) -> float:
        """Percentage for a brand name; 0 if there is no such bucket."""
        for bucket in self.buckets:
            if bucket.brand == brand:
                return self.percentage(bucket)
        return 0
