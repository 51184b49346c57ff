"""Synchronous HTTP clients for the storefront and project tracker APIs.

Error envelopes returned by the API are raised as the same domain errors the
server uses, so callers handle ``NotFound`` or ``ConflictError`` directly.
"""

from datetime import date
from typing import Any

import httpx

from src.crudhub.client.cart import Cart
from src.crudhub.core.errors import (
    ConflictError,
    CrudHubError,
    InvalidCredentials,
    NotFound,
    UpstreamError,
    ValidationError,
)
from src.crudhub.core.services.jwt import SessionToken
from src.crudhub.entities.core.user import PublicUser
from src.crudhub.entities.service.order import Order
from src.crudhub.entities.service.product import Product
from src.crudhub.entities.service.project import Project

_ERRORS_BY_CODE: dict[str, type[CrudHubError]] = {
    ValidationError.code: ValidationError,
    ConflictError.code: ConflictError,
    UpstreamError.code: UpstreamError,
}


def raise_for_error(response: httpx.Response) -> None:
    if response.is_success:
        return
    try:
        error = response.json().get("error", {})
    except ValueError:
        error = {}
    code = error.get("code", "error")
    message = error.get("message", response.text)
    details = error.get("details") or {}

    if code == NotFound.code:
        raise NotFound(details.get("entity", "Resource"), details.get("id", "?"))
    if code == InvalidCredentials.code:
        raise InvalidCredentials(message)
    error_cls = _ERRORS_BY_CODE.get(code)
    if error_cls is not None:
        raise error_cls(message, details)
    raise CrudHubError(f"HTTP {response.status_code}: {message}", details)


class _BaseClient:
    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._http.request(method, path, **kwargs)
        raise_for_error(response)
        return response.json()

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def _page(offset: int, limit: int | None) -> dict[str, int]:
    params = {"offset": offset}
    if limit is not None:
        params["limit"] = limit
    return params


class StorefrontClient(_BaseClient):
    """Products, accounts and checkout."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.session_token: SessionToken | None = None

    def list_products(self, offset: int = 0, limit: int | None = None) -> list[Product]:
        data = self._request("GET", "/api/products", params=_page(offset, limit))
        return [Product.model_validate(item) for item in data]

    def get_product(self, product_id: str) -> Product:
        return Product.model_validate(self._request("GET", f"/api/products/{product_id}"))

    def create_product(self, name: str, price: float, description: str = "") -> Product:
        body = {"name": name, "price": price, "description": description}
        return Product.model_validate(self._request("POST", "/api/products", json=body))

    def register(self, email: str, password: str) -> PublicUser:
        body = {"email": email, "password": password}
        return PublicUser.model_validate(
            self._request("POST", "/api/auth/register", json=body)
        )

    def login(self, email: str, password: str) -> SessionToken:
        """Log in and keep the session credential for later calls."""
        body = {"email": email, "password": password}
        self.session_token = SessionToken.model_validate(
            self._request("POST", "/api/auth/login", json=body)
        )
        return self.session_token

    def me(self) -> PublicUser:
        if self.session_token is None:
            raise InvalidCredentials("Not logged in")
        headers = {"Authorization": f"Bearer {self.session_token.access_token}"}
        return PublicUser.model_validate(
            self._request("GET", "/api/auth/me", headers=headers)
        )

    def checkout(self, cart: Cart) -> dict[str, str]:
        """Start a payment session for ``cart``; the cart is cleared on success."""
        body = {"items": [item.model_dump() for item in cart.to_line_items()]}
        result = self._request("POST", "/api/checkout", json=body)
        cart.clear()
        return result

    def get_order(self, order_id: str) -> Order:
        return Order.model_validate(self._request("GET", f"/api/orders/{order_id}"))


class ProjectsClient(_BaseClient):
    """Projects and their tasks."""

    def list_projects(self, offset: int = 0, limit: int | None = None) -> list[Project]:
        data = self._request("GET", "/api/projects", params=_page(offset, limit))
        return [Project.model_validate(item) for item in data]

    def get_project(self, project_id: str) -> Project:
        return Project.model_validate(self._request("GET", f"/api/projects/{project_id}"))

    def create_project(self, name: str, description: str) -> Project:
        body = {"name": name, "description": description}
        return Project.model_validate(self._request("POST", "/api/projects", json=body))

    def add_task(self, project_id: str, name: str, deadline: date | str) -> Project:
        body = {
            "name": name,
            "deadline": deadline.isoformat() if isinstance(deadline, date) else deadline,
        }
        return Project.model_validate(
            self._request("POST", f"/api/projects/{project_id}/tasks", json=body)
        )
