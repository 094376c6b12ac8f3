# tests/test_filters.py
from clothing_catalog.filters import filter_products, category_name
from clothing_catalog.models import Category, Product, UNKNOWN_CATEGORY

PRODUCTS = [
    Product(id=1, code="A", name="Red Shirt", import_date="01/01/2020", quantity=1, category_id=1),
    Product(id=2, code="B", name="Blue Pants", import_date="01/01/2020", quantity=2, category_id=2),
]


def names(products):
    return [p.name for p in products]


def test_name_search_is_case_insensitive():
    assert names(filter_products(PRODUCTS, "shirt")) == ["Red Shirt"]
    assert names(filter_products(PRODUCTS, "SHIRT")) == ["Red Shirt"]


def test_category_filter_alone():
    assert names(filter_products(PRODUCTS, "", 2)) == ["Blue Pants"]
    # selections arrive as text from the form
    assert names(filter_products(PRODUCTS, "", "2")) == ["Blue Pants"]


def test_criteria_are_combined():
    assert filter_products(PRODUCTS, "shirt", 2) == []


def test_empty_criteria_match_everything():
    assert filter_products(PRODUCTS) == PRODUCTS
    assert filter_products(PRODUCTS, "", "") == PRODUCTS


def test_unknown_category_has_a_marker():
    categories = [Category(id=1, name="Shirts")]
    assert category_name(categories, 1) == "Shirts"
    assert category_name(categories, "1") == "Shirts"
    assert category_name(categories, 99) == UNKNOWN_CATEGORY
