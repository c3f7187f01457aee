"""Services for Catalog Viewer."""

from .aggregation_service import BrandStatistics, aggregate
from .api_client import ProductApiClient
from .observers import LoggingRequestObserver, RecordingRequestObserver, RequestObserver
from .product_store import OperationState, OperationStatus, ProductStore
from .search_dispatcher import SearchDispatcher
from .validation_service import ValidationResult, validate

__all__ = [
    "BrandStatistics",
    "aggregate",
    "ProductApiClient",
    "LoggingRequestObserver",
    "RecordingRequestObserver",
    "RequestObserver",
    "OperationState",
    "OperationStatus",
    "ProductStore",
    "SearchDispatcher",
    "ValidationResult",
    "validate",
]
