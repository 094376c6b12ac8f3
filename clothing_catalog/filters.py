# clothing_catalog/filters.py
from typing import Iterable, List, Optional, Sequence

from .models import Category, Identifier, Product, UNKNOWN_CATEGORY, same_id


def matches(product: Product, name_query: str = "", category_id: Optional[Identifier] = None) -> bool:
    if name_query and name_query.lower() not in product.name.lower():
        return False
    if category_id not in (None, "") and not same_id(product.category_id, category_id):
        return False
    return True


def filter_products(
    products: Iterable[Product],
    name_query: str = "",
    category_id: Optional[Identifier] = None,
) -> List[Product]:
    """Products whose name contains `name_query` (any case) and whose category is
    `category_id`. An empty criterion matches everything; order is preserved."""
    return [p for p in products if matches(p, name_query, category_id)]


def category_name(categories: Sequence[Category], category_id: Identifier) -> str:
    for c in categories:
        if same_id(c.id, category_id):
            return c.name
    return UNKNOWN_CATEGORY
