"""In-memory fake of the catalog REST API used by the tests."""

import json
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import requests


BASE_URL = "http://catalog.test"


def make_response(status_code: int, body: Any = None) -> requests.Response:
    """Build a real requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


class FakeCatalogServer:
    """
    In-memory stand-in for the catalog REST API.

    Implements the endpoint semantics the client depends on and records
    every request it receives. Set ``fail_with`` to an exception to
    simulate a transport failure.
    """

    def __init__(self):
        self.products: Dict[int, Dict[str, Any]] = {}
        self.requests = []
        self.headers: Dict[str, str] = {}
        self.fail_with: Optional[Exception] = None

    def seed(self, *products: Dict[str, Any]) -> None:
        for product in products:
            self.products[product["productKey"]] = dict(product)

    # requests.Session interface used by the client

    def request(self, method, url, params=None, json=None, timeout=None):
        self.requests.append((method, url, params, json))
        if self.fail_with is not None:
            raise self.fail_with
        path = urlsplit(url).path
        return self.handle(method, path, params or {}, json)

    def close(self):
        pass

    # Routing

    def handle(self, method, path, params, body):
        if path == "/products" and method == "GET":
            return make_response(200, list(self.products.values()))
        if path == "/products" and method == "POST":
            return self._create(body)
        if path == "/products" and method == "PUT":
            return self._update(body)
        if path == "/products/count":
            return make_response(200, len(self.products))
        if path == "/products/brand-summary":
            return make_response(200, self._brand_summary())
        if path == "/products/search":
            return make_response(200, self._search(params))

        key = int(path.rsplit("/", 1)[-1])
        if key not in self.products:
            return make_response(404)
        if method == "GET":
            return make_response(200, self.products[key])
        if method == "DELETE":
            del self.products[key]
            return make_response(204)
        return make_response(405)

    def _create(self, body):
        if not body.get("productName") or body.get("price") is None:
            return make_response(400, {"error": "Bad Request"})
        if body["productKey"] in self.products:
            return make_response(409, {"message": "Product key already exists"})
        self.products[body["productKey"]] = dict(body)
        return make_response(201, body)

    def _update(self, body):
        if body["productKey"] not in self.products:
            return make_response(404)
        self.products[body["productKey"]] = dict(body)
        return make_response(200, body)

    def _search(self, params):
        products = list(self.products.values())
        name = (params.get("name") or "").strip()
        brand = (params.get("brand") or "").strip()
        if name:
            return [p for p in products if name.lower() in p["productName"].lower()]
        if brand:
            return [p for p in products if (p.get("brand") or "").lower() == brand.lower()]
        return products

    def _brand_summary(self):
        counts: Dict[str, int] = {}
        for product in self.products.values():
            if product.get("brand"):
                counts[product["brand"]] = counts.get(product["brand"], 0) + 1
        ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [{"brand": brand, "count": count} for brand, count in ordered]


SAMPLE_PRODUCTS = [
    {
        "productKey": 1,
        "productName": "Anvil Deluxe",
        "brand": "Acme",
        "model": "AD-1",
        "retailer": "Desert Supply",
        "price": 149.99,
        "productDescription": "Heavy",
    },
    {"productKey": 2, "productName": "Rocket Skates", "brand": "Acme", "price": 89.5},
    {"productKey": 3, "productName": "Giant Magnet", "brand": "Acme", "price": 45},
    {"productKey": 4, "productName": "Zeta Widget", "brand": "Zeta", "price": 9.99},
]


