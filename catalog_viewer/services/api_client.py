"""API gateway client for the remote product catalog."""

import asyncio
import time
from typing import Any, Dict, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from catalog_viewer.config import settings
from catalog_viewer.core.exceptions import (
    CREATE_STATUS_ERRORS,
    STATUS_ERRORS,
    CatalogError,
    UnknownError,
    UnreachableError,
)
from catalog_viewer.schemas.product import BrandAggregate, Product, SearchCriteria
from catalog_viewer.services.observers import LoggingRequestObserver, RequestObserver

_product_list = TypeAdapter(List[Product])
_summary_list = TypeAdapter(List[BrandAggregate])


def _error_message(response: requests.Response) -> tuple:
    """Extract (message, body) from a structured error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None, None

    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value, body
    return None, body


def classify_response(
    response: requests.Response, status_errors: Dict[int, type] = STATUS_ERRORS
) -> CatalogError:
    """
    Map an unsuccessful HTTP response onto the error taxonomy.

    Args:
        response: The failed response
        status_errors: Status code to error class for the calling operation
    """
    message, body = _error_message(response)
    error_class = status_errors.get(response.status_code, UnknownError)
    if error_class is UnknownError and not message:
        message = f"Unexpected HTTP {response.status_code} from catalog server"
    return error_class(message, status_code=response.status_code, detail=body)


def classify_exception(exc: Exception) -> CatalogError:
    """Map a transport-level exception onto the error taxonomy."""
    if isinstance(exc, CatalogError):
        return exc
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return UnreachableError(f"Catalog server is unreachable: {exc}")
    return UnknownError(f"Request failed: {exc}")


class ProductApiClient:
    """
    Asynchronous wrapper around the catalog REST API.

    Each operation issues exactly one HTTP call and either returns parsed
    schemas or raises a classified CatalogError. Nothing is retried.
    Blocking I/O runs in a worker thread so the event loop stays free.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        observer: Optional[RequestObserver] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL; defaults to settings.api_base_url
            session: requests session to use (a new one is created if omitted)
            observer: Receives request/response/error events
            timeout: Transport timeout in seconds; defaults to settings.request_timeout
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )
        self.observer = observer or LoggingRequestObserver()
        self.timeout = timeout if timeout is not None else settings.request_timeout

    def close(self) -> None:
        self.session.close()

    # Operations

    async def list_all(self) -> List[Product]:
        """Fetch every product."""
        data = await self._request("GET", "/products")
        return self._parse(_product_list, data)

    async def get_by_key(self, key: int) -> Product:
        """Fetch one product; raises NotFoundError if it does not exist."""
        data = await self._request("GET", f"/products/{key}")
        return self._parse(Product, data)

    async def create(self, product: Product) -> Product:
        """Create a product; raises ConflictError for a duplicate key."""
        data = await self._request(
            "POST", "/products", json_body=product.to_payload(), status_errors=CREATE_STATUS_ERRORS
        )
        return self._parse(Product, data)

    async def update(self, product: Product) -> Product:
        """Replace a product in full, keyed by its product_key."""
        data = await self._request("PUT", "/products", json_body=product.to_payload())
        return self._parse(Product, data)

    async def delete(self, key: int) -> None:
        """Delete a product; an absent key raises NotFoundError."""
        await self._request("DELETE", f"/products/{key}")

    async def search(self, criteria: SearchCriteria) -> List[Product]:
        """Search by exactly one field (name or brand)."""
        data = await self._request("GET", "/products/search", params=criteria.to_params())
        return self._parse(_product_list, data)

    async def brand_summary(self) -> List[BrandAggregate]:
        """Fetch the server-side product count per brand."""
        data = await self._request("GET", "/products/brand-summary")
        return self._parse(_summary_list, data)

    async def count(self) -> int:
        """Fetch the total number of products."""
        data = await self._request("GET", "/products/count")
        if isinstance(data, bool) or not isinstance(data, int):
            raise UnknownError(f"Unexpected product count in response: {data!r}")
        return data

    # Transport

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        status_errors: Dict[int, type] = STATUS_ERRORS,
    ) -> Any:
        return await asyncio.to_thread(
            self._send, method, path, params, json_body, status_errors
        )

    def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]],
        json_body: Optional[Dict[str, Any]],
        status_errors: Dict[int, type],
    ) -> Any:
        url = f"{self.base_url}{path}"
        self.observer.on_request(method, url, params)
        started = time.perf_counter()

        try:
            response = self.session.request(
                method, url, params=params, json=json_body, timeout=self.timeout
            )
        except requests.RequestException as e:
            error = classify_exception(e)
            self.observer.on_error(method, url, error)
            raise error from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        self.observer.on_response(method, url, response.status_code, elapsed_ms)

        if not response.ok:
            error = classify_response(response, status_errors)
            self.observer.on_error(method, url, error)
            raise error

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            error = UnknownError(
                "Catalog server returned a malformed response",
                status_code=response.status_code,
            )
            self.observer.on_error(method, url, error)
            raise error from e

    @staticmethod
    def _parse(schema, data: Any) -> Any:
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_python(data)
            return schema.model_validate(data)
        except ValidationError as e:
            raise UnknownError(f"Unexpected response payload: {e}") from e
