"""Abstract repository for the Store entity."""

from __future__ import annotations

from catalog.domain.model.store import Store
from catalog.domain.repository.entity_store import EntityStore


class StoreRepository(EntityStore[Store]):
    """EntityStore for stores.

    ``get_with_relations`` fills ``Store.products``. ``save`` never
    writes the association; ``remove`` drops the removed store's
    association records along with it.
    """
