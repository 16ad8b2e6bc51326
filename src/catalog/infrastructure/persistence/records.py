"""Conversion between domain objects and their JSON records.

Relations are never part of a record: they live in the association
table and are attached by the repositories.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.domain.model.store import Store
from catalog.domain.model.value_objects import Money


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "type": product.type,
    }


def product_from_raw(raw: dict) -> Product:
    return Product(
        id=raw["id"],
        name=raw["name"],
        price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        type=raw["type"],
    )


def store_to_raw(store: Store) -> dict:
    return {
        "id": store.id,
        "name": store.name,
        "city": store.city,
        "address": store.address,
    }


def store_from_raw(raw: dict) -> Store:
    return Store(
        id=raw["id"],
        name=raw["name"],
        city=raw["city"],
        address=raw["address"],
    )


def link_to_raw(product_id: str, store_id: str) -> dict:
    return {"product_id": product_id, "store_id": store_id}
