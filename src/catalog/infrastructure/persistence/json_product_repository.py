"""JSON-file-backed implementation of ProductRepository.

Products and their associations are kept in separate tables. The
association table preserves the order of each product's ``stores``
list, repeated entries included.
"""

from __future__ import annotations

import uuid

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_table import JsonTable
from catalog.infrastructure.persistence.records import (
    link_to_raw,
    product_from_raw,
    product_to_raw,
    store_from_raw,
)


class JsonProductRepository(ProductRepository):

    def __init__(
        self,
        products: JsonTable,
        stores: JsonTable,
        links: JsonTable,
    ) -> None:
        self._products = products
        self._stores = stores
        self._links = links

    # --- ProductRepository interface ------------------------------------------

    def get(self, entity_id: str) -> Product | None:
        for raw in self._products.load():
            if raw["id"] == entity_id:
                return product_from_raw(raw)
        return None

    def get_with_relations(self, entity_id: str) -> Product | None:
        product = self.get(entity_id)
        if product is None:
            return None
        self._attach_stores([product])
        return product

    def list_all(self) -> list[Product]:
        return [product_from_raw(raw) for raw in self._products.load()]

    def list_with_relations(self) -> list[Product]:
        products = self.list_all()
        self._attach_stores(products)
        return products

    def save(self, entity: Product) -> Product:
        if entity.id is None:
            entity.id = uuid.uuid4().hex
        # Links are written before the product row. If the second write
        # fails a new product is not visible at all; its orphan links are
        # never read because loading always starts from the product table.
        # stores=None means the relation was not loaded: leave it alone.
        if entity.stores is not None:
            links = [
                link for link in self._links.load()
                if link["product_id"] != entity.id
            ]
            links.extend(link_to_raw(entity.id, store.id) for store in entity.stores)
            self._links.persist(links)
        self._products.upsert(product_to_raw(entity))
        return entity

    def remove(self, entity: Product) -> None:
        self._links.delete_where(product_id=entity.id)
        self._products.delete_where(id=entity.id)

    # --- Relation helpers -----------------------------------------------------

    def _attach_stores(self, products: list[Product]) -> None:
        stores = {raw["id"]: raw for raw in self._stores.load()}
        links = self._links.load()
        for product in products:
            product.stores = [
                store_from_raw(stores[link["store_id"]])
                for link in links
                if link["product_id"] == product.id and link["store_id"] in stores
            ]
