# clothing_catalog/store.py
import asyncio
import logging
from typing import Optional, Protocol, Sequence, Tuple, List

from .errors import TransportError
from .filters import category_name
from .models import Category, Identifier, Product

logger = logging.getLogger(__name__)


class CollectionReader(Protocol):
    async def list_products(self) -> List[Product]: ...

    async def list_categories(self) -> List[Category]: ...


class CatalogStore:
    """Last-fetched products and categories.

    Both lists are replaced wholesale on every successful fetch. A failed fetch
    keeps the previous copy and is only logged.
    """

    def __init__(self, client: CollectionReader):
        self.client = client
        self._products: Tuple[Product, ...] = ()
        self._categories: Tuple[Category, ...] = ()

    async def refresh_products(self) -> bool:
        try:
            fetched = await self.client.list_products()
        except TransportError as e:
            logger.error("Error fetching products: %s", e)
            return False
        # sorted() is stable, so equal quantities keep the service's order
        self._products = tuple(sorted(fetched, key=lambda p: p.quantity))
        logger.info("Products fetched: %d", len(self._products))
        return True

    async def refresh_categories(self) -> bool:
        try:
            fetched = await self.client.list_categories()
        except TransportError as e:
            logger.error("Error fetching categories: %s", e)
            return False
        self._categories = tuple(fetched)
        logger.info("Categories fetched: %d", len(self._categories))
        return True

    async def load(self) -> Tuple[bool, bool]:
        # independent round trips, nothing orders one against the other
        products_ok, categories_ok = await asyncio.gather(self.refresh_products(), self.refresh_categories())
        return products_ok, categories_ok

    def current_products(self) -> Sequence[Product]:
        return self._products

    def current_categories(self) -> Sequence[Category]:
        return self._categories

    def category_name(self, category_id: Identifier) -> str:
        return category_name(self._categories, category_id)

    def find_product(self, product_id: Identifier) -> Optional[Product]:
        for p in self._products:
            if p.id is not None and str(p.id) == str(product_id):
                return p
        return None
