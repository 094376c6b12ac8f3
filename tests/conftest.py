import asyncio
from typing import Any, Dict, List, Optional

import pytest

from clothing_catalog.errors import TransportError
from clothing_catalog.models import Category, Product
from collection_service import database


@pytest.fixture(autouse=True)
def _reset_service():
    database.reset_all()
    yield
    database.reset_all()


class FakeCollection:
    """In-process stand-in for the collection service, for store/session tests."""

    def __init__(self, products: Optional[List[Dict[str, Any]]] = None, categories: Optional[List[Dict[str, Any]]] = None):
        self.products = [dict(p) for p in (products or [])]
        self.categories = [dict(c) for c in (categories or [{"id": 1, "name": "Shirts"}, {"id": 2, "name": "Pants"}])]
        self.created: List[Dict[str, Any]] = []
        self.replaced: List[Any] = []
        self.fail_reads = False
        self.fail_writes = False
        self.gate: Optional[asyncio.Event] = None
        self.read_gate: Optional[asyncio.Event] = None
        self._next_id = 100

    async def list_products(self):
        if self.read_gate is not None:
            await self.read_gate.wait()
        if self.fail_reads:
            raise TransportError("connection refused")
        return [Product.model_validate(p) for p in self.products]

    async def list_categories(self):
        if self.fail_reads:
            raise TransportError("connection refused")
        return [Category.model_validate(c) for c in self.categories]

    async def create_product(self, payload):
        self.created.append(payload)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_writes:
            raise TransportError("500 Internal Server Error", status_code=500)
        self._next_id += 1
        body = {**payload, "id": self._next_id}
        self.products.append(body)
        return body

    async def replace_product(self, product_id, payload):
        self.replaced.append((product_id, payload))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_writes:
            raise TransportError("404 Not Found", status_code=404)
        for i, p in enumerate(self.products):
            if str(p["id"]) == str(product_id):
                self.products[i] = {**payload, "id": p["id"]}
                return self.products[i]
        raise TransportError("404 Not Found", status_code=404)


@pytest.fixture
def fake():
    return FakeCollection(products=[
        {"id": 1, "code": "SH-01", "name": "Red Shirt", "importDate": "01/01/2020", "quantity": 9, "categoryId": 1},
        {"id": 2, "code": "PA-01", "name": "Blue Pants", "importDate": "15/06/2021", "quantity": 3, "categoryId": 2},
        {"id": 3, "code": "SH-02", "name": "Green Shirt", "importDate": "10/10/2022", "quantity": 5, "categoryId": 7},
    ])
