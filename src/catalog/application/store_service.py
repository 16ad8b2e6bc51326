"""Application service: Store use cases."""

from __future__ import annotations

import logging
from dataclasses import replace

from catalog.application.dto import StoreUpdate
from catalog.domain.exceptions import STORE_NOT_FOUND, EntityNotFoundError, ValidationError
from catalog.domain.model.store import Store
from catalog.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class StoreService:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def find_all(self) -> list[Store]:
        return self._store_repo.list_all()

    def find_one(self, store_id: str) -> Store:
        """Return a store with the products it carries."""
        store = self._store_repo.get_with_relations(store_id)
        if store is None:
            raise EntityNotFoundError(STORE_NOT_FOUND, "store", store_id)
        return store

    def create(self, store: Store) -> Store:
        if not store.name or not store.name.strip():
            raise ValidationError("Store name is required", "store", store.id)

        store.name = store.name.strip()
        saved = self._store_repo.save(store)
        logger.info("Store %s created", saved.id, extra={"store_id": saved.id})
        return saved

    def update(self, store_id: str, changes: StoreUpdate) -> Store:
        persisted = self._store_repo.get(store_id)
        if persisted is None:
            raise EntityNotFoundError(STORE_NOT_FOUND, "store", store_id)

        if changes.name is not None and not changes.name.strip():
            raise ValidationError("Store name is required", "store", store_id)

        merged = replace(
            persisted,
            name=changes.name.strip() if changes.name is not None else persisted.name,
            city=changes.city if changes.city is not None else persisted.city,
            address=changes.address if changes.address is not None else persisted.address,
        )
        saved = self._store_repo.save(merged)
        logger.info("Store %s updated", store_id, extra={"store_id": store_id})
        return saved

    def delete(self, store_id: str) -> None:
        """Delete a store. Its association records go with it."""
        store = self._store_repo.get(store_id)
        if store is None:
            raise EntityNotFoundError(STORE_NOT_FOUND, "store", store_id)

        self._store_repo.remove(store)
        logger.info("Store %s deleted", store_id, extra={"store_id": store_id})
