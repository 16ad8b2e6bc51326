"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.model.store import Store
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.store_repository import StoreRepository


class _SequentialIds:

    def __init__(self) -> None:
        self._next_id = 1

    def next_id(self, taken: dict) -> str:
        while str(self._next_id) in taken:
            self._next_id += 1
        return str(self._next_id)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self._ids = _SequentialIds()
        self.saves = 0
        for p in products or []:
            self.save(p)
        self.saves = 0

    def get(self, entity_id: str) -> Product | None:
        return self._store.get(entity_id)

    def get_with_relations(self, entity_id: str) -> Product | None:
        product = self._store.get(entity_id)
        if product is not None and product.stores is None:
            product.stores = []
        return product

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def list_with_relations(self) -> list[Product]:
        return [self.get_with_relations(pid) for pid in list(self._store)]

    def save(self, entity: Product) -> Product:
        if entity.id is None:
            entity.id = self._ids.next_id(self._store)
        previous = self._store.get(entity.id)
        if entity.stores is None and previous is not None:
            entity.stores = previous.stores
        self._store[entity.id] = entity
        self.saves += 1
        return entity

    def remove(self, entity: Product) -> None:
        self._store.pop(entity.id, None)


class FakeStoreRepository(StoreRepository):
    """Fake store repository.

    When given the product repository it can load ``Store.products`` and
    drop a removed store from every product, like the JSON repository.
    """

    def __init__(
        self,
        stores: list[Store] | None = None,
        product_repo: FakeProductRepository | None = None,
    ) -> None:
        self._store: dict[str, Store] = {}
        self._ids = _SequentialIds()
        self._product_repo = product_repo
        for s in stores or []:
            self.save(s)

    def get(self, entity_id: str) -> Store | None:
        return self._store.get(entity_id)

    def get_with_relations(self, entity_id: str) -> Store | None:
        store = self._store.get(entity_id)
        if store is not None:
            store.products = self._products_of(store)
        return store

    def list_all(self) -> list[Store]:
        return list(self._store.values())

    def list_with_relations(self) -> list[Store]:
        return [self.get_with_relations(sid) for sid in list(self._store)]

    def save(self, entity: Store) -> Store:
        if entity.id is None:
            entity.id = self._ids.next_id(self._store)
        self._store[entity.id] = entity
        return entity

    def remove(self, entity: Store) -> None:
        self._store.pop(entity.id, None)
        if self._product_repo is not None:
            for product in self._product_repo.list_all():
                if product.stores:
                    product.stores = [s for s in product.stores if s.id != entity.id]

    def _products_of(self, store: Store) -> list[Product]:
        if self._product_repo is None:
            return []
        return [
            p for p in self._product_repo.list_all()
            if any(s.id == store.id for s in p.stores or [])
        ]
