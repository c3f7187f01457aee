"""Product store holding the working set consumed by views."""

import enum
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from catalog_viewer.core.exceptions import CatalogError, ErrorKind, InvalidInputError
from catalog_viewer.schemas.product import BrandAggregate, Product, ProductDraft, SearchCriteria
from catalog_viewer.services.aggregation_service import BrandStatistics
from catalog_viewer.services.api_client import ProductApiClient
from catalog_viewer.services.validation_service import validate
from catalog_viewer.utils.logger import logger

UNREACHABLE_PREFIX = "Cannot reach the catalog server."

# Default failure message per operation
ERROR_MESSAGES = {
    "load": "Failed to fetch products. Please try again later.",
    "search": "Failed to search products. Please try again.",
    "load_one": "Failed to fetch product details. Please try again later.",
    "create": "Failed to create product. Please try again later.",
    "update": "Failed to update product. Please try again.",
    "delete": "Failed to delete product. Please try again.",
    "summary": "Failed to fetch brand summary. Please try again later.",
    "count": "Failed to fetch product count. Please try again later.",
}

# Overrides for specific (operation, kind) pairs
KIND_MESSAGES = {
    ("create", ErrorKind.INVALID_INPUT): "Invalid product data. Please check your inputs and try again.",
    ("create", ErrorKind.CONFLICT): "A product with this Product Key already exists.",
    ("update", ErrorKind.INVALID_INPUT): "Invalid product data. Please check your inputs and try again.",
    ("update", ErrorKind.NOT_FOUND): "Product not found.",
    ("delete", ErrorKind.NOT_FOUND): "Product not found.",
    ("load_one", ErrorKind.NOT_FOUND): "Product not found.",
}

LOCAL_VALIDATION_MESSAGE = "Please correct the highlighted fields."


def error_message(operation: str, error: CatalogError) -> str:
    """Human-readable message for a failed store operation."""
    message = KIND_MESSAGES.get((operation, error.kind), ERROR_MESSAGES[operation])
    if error.kind == ErrorKind.UNREACHABLE:
        return f"{UNREACHABLE_PREFIX} {message}"
    return message


class OperationStatus(str, enum.Enum):
    """Lifecycle of a single store operation."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


class OperationState(BaseModel):
    """Observable state of one store operation."""

    status: OperationStatus = OperationStatus.IDLE
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    field_errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_pending(self) -> bool:
        return self.status == OperationStatus.PENDING

    @property
    def is_error(self) -> bool:
        return self.status == OperationStatus.ERROR


class ProductStore:
    """
    Holds the latest product snapshot and single-record view.

    Every fetch or search replaces the snapshot wholesale. Mutations never
    patch the snapshot locally: after a create, update or delete it is
    flagged stale and the caller reloads. Failures are recorded on the
    operation state and returned as False, never raised.
    """

    OPERATIONS = tuple(ERROR_MESSAGES)

    def __init__(self, client: ProductApiClient):
        self.client = client
        self.products: List[Product] = []
        self.current: Optional[Product] = None
        self.summary: List[BrandAggregate] = []
        self.total_count: Optional[int] = None
        self.active_criteria: Optional[SearchCriteria] = None
        self.is_stale = False
        # Bumped by every successful mutation
        self.revision = 0
        self.summary_revision: Optional[int] = None
        self.states: Dict[str, OperationState] = {
            operation: OperationState() for operation in self.OPERATIONS
        }

    def state(self, operation: str) -> OperationState:
        return self.states[operation]

    @property
    def summary_is_stale(self) -> bool:
        """True until the brand summary has been fetched since the last mutation."""
        return self.summary_revision != self.revision

    @property
    def statistics(self) -> BrandStatistics:
        """Brand statistics over the current snapshot."""
        return BrandStatistics.from_products(self.products)

    # Queries

    async def load(self) -> bool:
        """Replace the snapshot with every product; keep it on failure."""
        self._begin("load")
        try:
            products = await self.client.list_all()
        except CatalogError as e:
            return self._fail("load", e)

        self._replace_snapshot(products)
        self.active_criteria = None
        logger.info(f"Loaded {len(self.products)} products")
        return self._succeed("load")

    async def load_one(self, key: int) -> bool:
        """Fetch and hold a single product, independent of the snapshot."""
        self._begin("load_one")
        try:
            self.current = await self.client.get_by_key(key)
        except CatalogError as e:
            return self._fail("load_one", e)
        return self._succeed("load_one")

    async def apply_search(self, criteria: SearchCriteria) -> bool:
        """Replace the snapshot with search results; a blank term loads everything."""
        if criteria.is_empty:
            return await self.load()

        self._begin("search")
        try:
            products = await self.client.search(criteria)
        except CatalogError as e:
            return self._fail("search", e)

        self._replace_snapshot(products)
        self.active_criteria = criteria
        logger.info(
            f"Search {criteria.field.value}='{criteria.term}' matched {len(self.products)} products"
        )
        return self._succeed("search")

    async def load_summary(self) -> bool:
        """Fetch the server-side brand summary."""
        self._begin("summary")
        revision = self.revision
        try:
            self.summary = await self.client.brand_summary()
        except CatalogError as e:
            return self._fail("summary", e)
        self.summary_revision = revision
        return self._succeed("summary")

    async def load_count(self) -> bool:
        """Fetch the server-side product count."""
        self._begin("count")
        try:
            self.total_count = await self.client.count()
        except CatalogError as e:
            return self._fail("count", e)
        return self._succeed("count")

    # Mutations

    async def apply_create(self, draft: ProductDraft) -> bool:
        """
        Validate and submit a new product.

        An invalid draft never reaches the network. On success the snapshot
        is marked stale; the new product is not inserted locally.

        Args:
            draft: Product draft as entered by the user

        Returns:
            True if the server accepted the product
        """
        self._begin("create")
        product = self._validated("create", draft)
        if product is None:
            return False

        try:
            created = await self.client.create(product)
        except CatalogError as e:
            return self._fail("create", e)

        self._mutated()
        logger.info(f"Created product {created.product_key}")
        return self._succeed("create")

    async def apply_update(self, product: Union[Product, ProductDraft]) -> bool:
        """
        Replace a product on the server.

        The single-record view is replaced with the record the server echoes
        back, not with the submitted value. A draft is validated first.
        """
        self._begin("update")
        if isinstance(product, ProductDraft):
            product = self._validated("update", product)
            if product is None:
                return False

        try:
            updated = await self.client.update(product)
        except CatalogError as e:
            return self._fail("update", e)

        self.current = updated
        self._mutated()
        logger.info(f"Updated product {updated.product_key}")
        return self._succeed("update")

    async def apply_delete(self, key: int) -> bool:
        """Delete a product; the caller is expected to leave the detail view."""
        self._begin("delete")
        try:
            await self.client.delete(key)
        except CatalogError as e:
            return self._fail("delete", e)

        if self.current is not None and self.current.product_key == key:
            self.current = None
        self._mutated()
        logger.info(f"Deleted product {key}")
        return self._succeed("delete")

    # State transitions

    def _begin(self, operation: str) -> None:
        self.states[operation] = OperationState(status=OperationStatus.PENDING)

    def _succeed(self, operation: str) -> bool:
        self.states[operation] = OperationState(status=OperationStatus.SUCCESS)
        return True

    def _mutated(self) -> None:
        self.is_stale = True
        self.revision += 1

    def _fail(self, operation: str, error: CatalogError) -> bool:
        logger.error(f"Error during {operation}: {error.message}")
        self.states[operation] = OperationState(
            status=OperationStatus.ERROR,
            error=error_message(operation, error),
            error_kind=error.kind,
        )
        return False

    def _validated(self, operation: str, draft: ProductDraft) -> Optional[Product]:
        result = validate(draft)
        if result.is_valid:
            return draft.to_product()

        logger.warning(f"Rejected {operation} draft: {result.summary()}")
        self.states[operation] = OperationState(
            status=OperationStatus.ERROR,
            error=LOCAL_VALIDATION_MESSAGE,
            error_kind=InvalidInputError.kind,
            field_errors=result.errors,
        )
        return None

    def _replace_snapshot(self, products: Iterable[Product]) -> None:
        unique: Dict[int, Product] = {}
        for product in products:
            if product.product_key in unique:
                logger.warning(f"Dropping duplicate product key {product.product_key}")
                continue
            unique[product.product_key] = product
        self.products = list(unique.values())
        self.is_stale = False
