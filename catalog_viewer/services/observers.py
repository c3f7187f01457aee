"""Request observers for tracing catalog API traffic."""

from typing import Any, Dict, List, Optional, Tuple

from catalog_viewer.core.exceptions import CatalogError, ErrorKind
from catalog_viewer.utils.logger import logger


class RequestObserver:
    """
    Receives a callback for every request the API client sends.

    The base class ignores every event; subclass it and override the hooks
    you need, then pass an instance to ProductApiClient.
    """

    def on_request(self, method: str, url: str, params: Optional[Dict[str, Any]] = None) -> None:
        pass

    def on_response(self, method: str, url: str, status_code: int, elapsed_ms: float) -> None:
        pass

    def on_error(self, method: str, url: str, error: CatalogError) -> None:
        pass


class LoggingRequestObserver(RequestObserver):
    """Logs requests, responses and failures through loguru."""

    def on_request(self, method, url, params=None):
        if params:
            logger.debug(f"→ {method} {url} params={params}")
        else:
            logger.debug(f"→ {method} {url}")

    def on_response(self, method, url, status_code, elapsed_ms):
        logger.debug(f"← {method} {url} {status_code} ({elapsed_ms:.0f} ms)")

    def on_error(self, method, url, error):
        if error.kind in (ErrorKind.UNREACHABLE, ErrorKind.UNKNOWN):
            logger.error(f"{method} {url} failed: {error.message}")
        else:
            logger.warning(
                f"{method} {url} returned {error.status_code}: {error.message}"
            )


class RecordingRequestObserver(RequestObserver):
    """Keeps every event in memory; handy for diagnostics and tests."""

    def __init__(self):
        self.events: List[Tuple[Any, ...]] = []

    def on_request(self, method, url, params=None):
        self.events.append(("request", method, url, params))

    def on_response(self, method, url, status_code, elapsed_ms):
        self.events.append(("response", method, url, status_code))

    def on_error(self, method, url, error):
        self.events.append(("error", method, url, error.kind))
