"""JSON-file-backed implementation of StoreRepository."""

from __future__ import annotations

import uuid

from catalog.domain.model.store import Store
from catalog.domain.repository.store_repository import StoreRepository
from catalog.infrastructure.persistence.json_table import JsonTable
from catalog.infrastructure.persistence.records import (
    product_from_raw,
    store_from_raw,
    store_to_raw,
)


class JsonStoreRepository(StoreRepository):

    def __init__(
        self,
        stores: JsonTable,
        products: JsonTable,
        links: JsonTable,
    ) -> None:
        self._stores = stores
        self._products = products
        self._links = links

    # --- StoreRepository interface --------------------------------------------

    def get(self, entity_id: str) -> Store | None:
        for raw in self._stores.load():
            if raw["id"] == entity_id:
                return store_from_raw(raw)
        return None

    def get_with_relations(self, entity_id: str) -> Store | None:
        store = self.get(entity_id)
        if store is None:
            return None
        self._attach_products([store])
        return store

    def list_all(self) -> list[Store]:
        return [store_from_raw(raw) for raw in self._stores.load()]

    def list_with_relations(self) -> list[Store]:
        stores = self.list_all()
        self._attach_products(stores)
        return stores

    def save(self, entity: Store) -> Store:
        # Store.products is the inverse side and is never written from here
        if entity.id is None:
            entity.id = uuid.uuid4().hex
        self._stores.upsert(store_to_raw(entity))
        return entity

    def remove(self, entity: Store) -> None:
        self._links.delete_where(store_id=entity.id)
        self._stores.delete_where(id=entity.id)

    # --- Relation helpers -----------------------------------------------------

    def _attach_products(self, stores: list[Store]) -> None:
        products = {raw["id"]: raw for raw in self._products.load()}
        links = self._links.load()
        for store in stores:
            store.products = [
                product_from_raw(products[link["product_id"]])
                for link in links
                if link["store_id"] == store.id and link["product_id"] in products
            ]
