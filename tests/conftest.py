"""Shared pytest fixtures for catalog, selection, and cart tests."""
from __future__ import annotations

import pytest

from storefront.cart import Cart
from storefront.data import catalog_item_from_record
from storefront.models import CatalogItem
from storefront.persistence import InMemoryKeyValueStore


@pytest.fixture
def sized_item() -> CatalogItem:
    """Two sizes, three free fillings, one paid filling priced 10 small / 20 large."""
    return catalog_item_from_record(
        {
            "id": "p1",
            "name": "Pie",
            "price": 0,
            "hasVariants": True,
            "variants": [{"size": "small", "price": 40}, {"size": "large", "price": 70}],
            "hasFillings": True,
            "freeFillings": ["a", "b", "c"],
            "paidFillings": [{"name": "x", "smallPrice": 10, "largePrice": 20}],
            "mainImage": "pie.jpg",
        }
    )


@pytest.fixture
def plain_item() -> CatalogItem:
    """No variants; fillings enabled so surcharge-free pricing can be checked."""
    return catalog_item_from_record(
        {
            "id": "p2",
            "name": "Bread",
            "price": "12.50",
            "hasVariants": False,
            "hasFillings": True,
            "freeFillings": ["sesame"],
            "paidFillings": [{"name": "cheese", "smallPrice": 3, "largePrice": 5}],
        }
    )


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def cart(store: InMemoryKeyValueStore) -> Cart:
    return Cart(store)
