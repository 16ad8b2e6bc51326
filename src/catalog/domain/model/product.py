"""Product aggregate.

Products live independently of stores. The Product owns the
product/store association: its ``stores`` list is the only place where
membership is recorded and changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.store import Store
from catalog.domain.model.value_objects import Money


class ProductType(Enum):
    PERISHABLE = "Perishable"
    NON_PERISHABLE = "NonPerishable"

    @classmethod
    def allows(cls, value: str) -> bool:
        return value in {t.value for t in cls}


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. ``stores`` is ``None`` while the relation
    has not been loaded, which is different from an empty list: saving a
    product with ``stores=None`` leaves its associations as they are.
    """

    name: str
    price: Money
    type: str
    id: str | None = None
    stores: list[Store] | None = None

    # --- Association helpers --------------------------------------------------

    def add_store(self, store: Store) -> None:
        """Append a store. Repeated stores are kept as repeated entries."""
        self.stores = [*self._loaded_stores(), store]

    def find_store(self, store_id: str) -> Store | None:
        for store in self._loaded_stores():
            if store.id == store_id:
                return store
        return None

    def replace_stores(self, stores: list[Store]) -> None:
        self.stores = list(stores)

    def remove_store(self, store_id: str) -> None:
        """Drop every entry for ``store_id``, keeping the others in order."""
        self.stores = [s for s in self._loaded_stores() if s.id != store_id]

    def _loaded_stores(self) -> list[Store]:
        if self.stores is None:
            raise ValidationError(
                f"Stores of product '{self.id}' were not loaded",
                entity="product",
                entity_id=self.id,
            )
        return self.stores
