"""Module: abstract_map_service."""

import logging
from typing import List, Optional, TypeVar

from petclinic.services.base import CrudService
from petclinic.services.map.keyed_store import KeyedStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


# Generic CRUD over one KeyedStore; every per-entity map service builds on this.
class AbstractMapService(CrudService[T, int]):
    entity_name = "entity"

    def __init__(self, store: Optional[KeyedStore[T]] = None):
        self.store: KeyedStore[T] = store if store is not None else KeyedStore(self.entity_name)

    def find_all(self) -> List[T]:
        return self.store.get_all()

    def find_by_id(self, id: int) -> Optional[T]:
        return self.store.get(id)

    def save(self, entity: T) -> T:
        if entity is None:
            raise ValueError(f"Cannot save an empty {self.entity_name}")
        return self.store.put(entity)

    def delete(self, entity: T) -> None:
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            return
        self.delete_by_id(entity_id)

    def delete_by_id(self, id: int) -> None:
        self.store.remove(id)
