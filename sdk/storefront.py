# sdk/storefront.py
import os
from typing import Any, Optional

import httpx
import requests

DEFAULT_BASE_URL = os.getenv("MOCK_API_URL", "http://127.0.0.1:3001")


class StoreApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text
    if isinstance(body, dict) and "error" in body:
        return body["error"]
    return str(body)


class StoreClient:
    """Thin client for the storefront fixture API.

    ``session`` defaults to a ``requests.Session``; anything exposing the same
    get/post/put/delete call style (a FastAPI ``TestClient`` for instance)
    can be passed instead.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, token: Optional[str] = None,
                 timeout: int = 10, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.token = token

    def _headers(self) -> dict:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method: str, path: str, **kwargs):
        r = self.session.request(method, f"{self.base_url}{path}", headers=self._headers(),
                                 timeout=self.timeout, **kwargs)
        if r.status_code >= 400:
            raise StoreApiError(r.status_code, _error_message(r))
        if r.status_code == 204:
            return None
        return r.json()

    def health(self):
        return self._request("GET", "/health")

    def reset(self):
        return self._request("POST", "/reset")

    # Auth
    def login(self, email: str, password: str):
        body = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self.token = body["token"]
        return body

    def register(self, email: str, first_name: str, last_name: str, password: str):
        return self._request("POST", "/api/auth/register", json={
            "email": email, "firstName": first_name, "lastName": last_name, "password": password,
        })

    # Products
    def list_products(self, category: Optional[str] = None, query: Optional[str] = None):
        params = {}
        if category:
            params["category"] = category
        if query:
            params["q"] = query
        return self._request("GET", "/api/products", params=params)

    def search_products(self, query: str):
        return self._request("GET", "/api/products/search", params={"q": query})

    def get_product(self, product_id: int):
        return self._request("GET", f"/api/products/{product_id}")

    # Cart
    def get_cart(self):
        return self._request("GET", "/api/cart")

    def add_to_cart(self, product_id, quantity: int = 1):
        return self._request("POST", "/api/cart/items", json={"productId": product_id, "quantity": quantity})

    def update_cart_item(self, product_id, quantity: int):
        return self._request("PUT", f"/api/cart/items/{product_id}", json={"quantity": quantity})

    def remove_from_cart(self, product_id):
        return self._request("DELETE", f"/api/cart/items/{product_id}")

    async def add_to_cart_async(self, product_id, quantity: int = 1,
                                transport: Optional[httpx.AsyncBaseTransport] = None):
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout,
                                     transport=transport) as client:
            r = await client.post("/api/cart/items", headers=self._headers(),
                                  json={"productId": product_id, "quantity": quantity})
        if r.status_code >= 400:
            raise StoreApiError(r.status_code, _error_message(r))
        return r.json()
