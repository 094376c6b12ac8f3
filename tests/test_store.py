# tests/test_store.py
import asyncio
import itertools

import httpx

from catalog_sdk import AsyncCatalogClient
from clothing_catalog.models import UNKNOWN_CATEGORY
from clothing_catalog.store import CatalogStore
from collection_service.main import app
from collection_service.database import PRODUCTS
from tests.conftest import FakeCollection


def quantities(store):
    return [p.quantity for p in store.current_products()]


def test_products_are_sorted_by_quantity(fake):
    store = CatalogStore(fake)
    assert asyncio.run(store.refresh_products()) is True
    assert quantities(store) == [3, 5, 9]


def test_sorting_holds_for_every_service_order():
    rows = [
        {"id": i, "code": f"C{i}", "name": f"P{i}", "importDate": "01/01/2020", "quantity": q, "categoryId": 1}
        for i, q in enumerate([4, 1, 4, 2], start=1)
    ]
    for ordering in itertools.permutations(rows):
        store = CatalogStore(FakeCollection(products=list(ordering)))
        asyncio.run(store.refresh_products())
        qs = quantities(store)
        assert qs == sorted(qs)


def test_refresh_is_idempotent(fake):
    store = CatalogStore(fake)
    asyncio.run(store.refresh_products())
    first = list(store.current_products())
    asyncio.run(store.refresh_products())
    assert list(store.current_products()) == first


def test_failed_refresh_keeps_previous_copy(fake, caplog):
    store = CatalogStore(fake)
    asyncio.run(store.load())
    before = store.current_products()
    fake.fail_reads = True
    fake.products = []
    with caplog.at_level("ERROR"):
        assert asyncio.run(store.refresh_products()) is False
        assert asyncio.run(store.refresh_categories()) is False
    assert store.current_products() == before
    assert len(store.current_categories()) == 2
    assert "Error fetching products" in caplog.text


def test_snapshots_are_read_only(fake):
    store = CatalogStore(fake)
    asyncio.run(store.load())
    assert isinstance(store.current_products(), tuple)
    assert isinstance(store.current_categories(), tuple)


def test_unknown_category_marker(fake):
    store = CatalogStore(fake)
    asyncio.run(store.load())
    green = store.find_product(3)
    assert store.category_name(green.category_id) == UNKNOWN_CATEGORY
    assert store.category_name(store.find_product("1").category_id) == "Shirts"


def test_store_against_collection_service():
    PRODUCTS[1] = {"id": 1, "code": "A", "name": "Coat", "importDate": "01/01/2020", "quantity": 30, "categoryId": 3}
    PRODUCTS[2] = {"id": 2, "code": "B", "name": "Tee", "importDate": "01/01/2020", "quantity": 2, "categoryId": 1}

    async def scenario():
        async with AsyncCatalogClient(base_url="http://test", transport=httpx.ASGITransport(app=app)) as client:
            store = CatalogStore(client)
            ok = await store.load()
            return ok, store

    ok, store = asyncio.run(scenario())
    assert ok == (True, True)
    assert [p.name for p in store.current_products()] == ["Tee", "Coat"]
    assert store.category_name(3) == "Jackets"


def test_bad_row_does_not_freeze_the_store():
    PRODUCTS[1] = {"id": 1, "code": "A", "name": "Coat", "importDate": "01/01/2020", "quantity": 30, "categoryId": 3}
    PRODUCTS[2] = {"id": 2, "code": "B", "name": "Broken", "importDate": "01/01/2020", "quantity": "abc", "categoryId": 1}

    async def scenario():
        async with AsyncCatalogClient(base_url="http://test", transport=httpx.ASGITransport(app=app)) as client:
            store = CatalogStore(client)
            ok = await store.refresh_products()
            return ok, store

    ok, store = asyncio.run(scenario())
    assert ok is True
    assert [p.name for p in store.current_products()] == ["Coat"]
