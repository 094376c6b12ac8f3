# collection_service/database.py
import itertools
from typing import Dict, Any, Iterator

# In-memory collections for the development service.

SEED_CATEGORIES = [
    {"id": 1, "name": "Shirts"},
    {"id": 2, "name": "Pants"},
    {"id": 3, "name": "Jackets"},
    {"id": 4, "name": "Dresses"},
]

PRODUCTS: Dict[int, Dict[str, Any]] = {}
CATEGORIES: Dict[int, Dict[str, Any]] = {}
_ids: Iterator[int] = itertools.count(1)


def next_product_id() -> int:
    return next(_ids)


def reset_all() -> None:
    global _ids
    PRODUCTS.clear()
    CATEGORIES.clear()
    for c in SEED_CATEGORIES:
        CATEGORIES[c["id"]] = dict(c)
    _ids = itertools.count(1)


reset_all()
