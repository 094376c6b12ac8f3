# catalog_sdk/catalog_client.py
import logging
from typing import Any, Dict, List, Optional

import httpx
import pydantic
import requests

from clothing_catalog.errors import TransportError
from clothing_catalog.models import Category, Identifier, Product

logger = logging.getLogger(__name__)


def _records(data: Any, model, label: str) -> list:
    # one bad row is skipped and logged, it never sinks the whole collection
    if not isinstance(data, list):
        raise TransportError(f"expected a list of {label}, got {type(data).__name__}")
    out = []
    for row in data:
        try:
            out.append(model.model_validate(row))
        except pydantic.ValidationError as e:
            row_id = row.get("id") if isinstance(row, dict) else None
            logger.warning("Skipping malformed %s record id=%r: %s", label, row_id, e)
    return out


def _products(data: Any) -> List[Product]:
    return _records(data, Product, "products")


def _categories(data: Any) -> List[Category]:
    return _records(data, Category, "categories")


def _without_id(payload: Dict[str, Any]) -> Dict[str, Any]:
    # the service assigns ids on create
    return {k: v for k, v in payload.items() if k != "id"}


class CatalogClient:
    """Blocking client for the collection service (scripts, demos, command line)."""

    def __init__(self, base_url: str = "http://localhost:3001", timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    def _call(self, method: str, path: str, **kwargs) -> Any:
        try:
            r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
            r.raise_for_status()
            return r.json()
        except requests.exceptions.HTTPError as e:
            raise TransportError(str(e), status_code=e.response.status_code) from e
        except (requests.exceptions.RequestException, ValueError) as e:
            raise TransportError(str(e)) from e

    def list_products(self) -> List[Product]:
        return _products(self._call("GET", "/products"))

    def list_categories(self) -> List[Category]:
        return _categories(self._call("GET", "/categories"))

    def create_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("POST", "/products", json=_without_id(payload))

    def replace_product(self, product_id: Identifier, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("PUT", f"/products/{product_id}", json={**payload, "id": product_id})

    def reset(self) -> Dict[str, Any]:
        return self._call("POST", "/reset")


class AsyncCatalogClient:
    """Non-blocking client; every call suspends the caller until the service answers."""

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "AsyncCatalogClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _call(self, method: str, path: str, **kwargs) -> Any:
        try:
            r = await self._http.request(method, path, **kwargs)
            r.raise_for_status()
            return r.json()
        except httpx.HTTPStatusError as e:
            raise TransportError(str(e), status_code=e.response.status_code) from e
        except (httpx.HTTPError, ValueError) as e:
            raise TransportError(str(e) or type(e).__name__) from e

    async def list_products(self) -> List[Product]:
        return _products(await self._call("GET", "/products"))

    async def list_categories(self) -> List[Category]:
        return _categories(await self._call("GET", "/categories"))

    async def create_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("POST /products %s", payload)
        return await self._call("POST", "/products", json=_without_id(payload))

    async def replace_product(self, product_id: Identifier, payload: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("PUT /products/%s %s", product_id, payload)
        return await self._call("PUT", f"/products/{product_id}", json={**payload, "id": product_id})


if __name__ == "__main__":
    import argparse
    from rich import print

    from clothing_catalog.config import get_settings

    parser = argparse.ArgumentParser(description="Clothing catalog collection service client")
    parser.add_argument("--base-url", default=None, help="Collection service address")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")
    subparsers.add_parser("list-categories", help="List all categories")

    cp = subparsers.add_parser("create-product", help="Create a product")
    cp.add_argument("--code", required=True)
    cp.add_argument("--name", required=True)
    cp.add_argument("--import-date", required=True, help="DD/MM/YYYY")
    cp.add_argument("--quantity", type=int, required=True)
    cp.add_argument("--category-id", type=int, required=True)

    rp = subparsers.add_parser("replace-product", help="Replace a product by id")
    rp.add_argument("--product-id", required=True)
    rp.add_argument("--code", required=True)
    rp.add_argument("--name", required=True)
    rp.add_argument("--import-date", required=True, help="DD/MM/YYYY")
    rp.add_argument("--quantity", type=int, required=True)
    rp.add_argument("--category-id", type=int, required=True)

    args = parser.parse_args()
    settings = get_settings()
    c = CatalogClient(base_url=args.base_url or settings.base_url, timeout=settings.timeout)

    def _body(a):
        return {
            "code": a.code, "name": a.name, "importDate": a.import_date,
            "quantity": a.quantity, "categoryId": a.category_id,
        }

    if args.command == "list-products":
        print([p.model_dump(by_alias=True) for p in c.list_products()])
    elif args.command == "list-categories":
        print([cat.model_dump() for cat in c.list_categories()])
    elif args.command == "create-product":
        print(c.create_product(_body(args)))
    elif args.command == "replace-product":
        print(c.replace_product(args.product_id, _body(args)))
