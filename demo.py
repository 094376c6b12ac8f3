#!/usr/bin/env python
import asyncio

from catalog_sdk import AsyncCatalogClient, CatalogClient
from clothing_catalog.config import get_settings
from clothing_catalog.filters import filter_products
from clothing_catalog.logging_setup import init_logging
from clothing_catalog.session import EditSession
from clothing_catalog.store import CatalogStore


def seed(c: CatalogClient):
    print("Resetting store...")
    c.reset()

    print("\nCreating products...")
    print(c.create_product({"code": "SH-01", "name": "Red Shirt", "importDate": "12/03/2024", "quantity": 40, "categoryId": 1}))
    print(c.create_product({"code": "PA-01", "name": "Blue Pants", "importDate": "01/02/2024", "quantity": 7, "categoryId": 2}))
    print(c.create_product({"code": "JA-01", "name": "Rain Jacket", "importDate": "20/11/2023", "quantity": 15, "categoryId": 3}))


async def walkthrough(base_url: str):
    async with AsyncCatalogClient(base_url=base_url) as client:
        store = CatalogStore(client)
        session = EditSession(store, client)

        await store.load()
        print("\nProducts by quantity:")
        for p in store.current_products():
            print(f"  {p.quantity:>4}  {p.name}  ({store.category_name(p.category_id)})")

        print("\nSearching for 'shirt'...")
        print([p.name for p in filter_products(store.current_products(), "shirt")])

        # -----------------------------
        # Rejected draft
        # -----------------------------
        print("\nAdding a product dated in the future...")
        session.open_new()
        session.update(code="DR-01", name="Summer Dress", import_date="01/01/2999", quantity="3", category_id="4")
        print(await session.submit(), "-", session.notices.message)

        # -----------------------------
        # Corrected and saved
        # -----------------------------
        session.update(import_date="05/05/2024")
        print(await session.submit(), "-", session.notices.message)

        # -----------------------------
        # Edit an existing product
        # -----------------------------
        pants = filter_products(store.current_products(), "pants")[0]
        print(f"\nRestocking {pants.name}...")
        session.open_existing(pants)
        session.update(quantity="70")
        print(await session.submit(), "-", session.notices.message)

        print("\nProducts by quantity:")
        for p in store.current_products():
            print(f"  {p.quantity:>4}  {p.name}")
        session.notices.clear()


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    seed(CatalogClient(base_url=settings.base_url, timeout=settings.timeout))
    asyncio.run(walkthrough(settings.base_url))


if __name__ == "__main__":
    main()
