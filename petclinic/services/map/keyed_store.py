"""
In-memory keyed storage for one entity type.

A ``KeyedStore`` maps integer identities to entities and hands out new
identities on first save.  The next identity is always one more than the
largest key currently stored, so deleting the highest entry frees its
identity for reuse while gaps lower down are never filled.

The store keeps its own copy of every entity and hands out fresh copies on
every read, so changing an entity after ``put`` has no effect on the store
until it is put again.  Copies are shallow: column values are copied, while
related entities (an owner's pets, a pet's type) are shared with the original.

Every access takes the store's lock: two concurrent ``put`` calls can never
receive the same fresh identity, and readers never see an entity stored
under a key that is still being assigned.
"""

import logging
import threading
from typing import Dict, Generic, List, Optional, TypeVar

from sqlalchemy import inspect
from sqlalchemy.orm.attributes import set_committed_value

logger = logging.getLogger(__name__)

T = TypeVar("T")


def copy_entity(entity: T) -> T:
    """Shallow copy of a mapped entity.

    Relationships are copied without firing backref events, so the copy
    never shows up in the related objects' collections.
    """
    state = inspect(entity)
    mapper = state.mapper
    clone = mapper.class_()
    for prop in mapper.column_attrs:
        setattr(clone, prop.key, getattr(entity, prop.key))
    for rel in mapper.relationships:
        # Only relationships the entity actually holds; untouched ones stay unset.
        if rel.key not in state.dict:
            continue
        value = state.dict[rel.key]
        set_committed_value(clone, rel.key, list(value) if rel.uselist else value)
    return clone


class KeyedStore(Generic[T]):
    """Thread-safe identity -> entity-copy mapping with max-plus-one identity assignment."""

    def __init__(self, name: str = "entities", id_attr: str = "id") -> None:
        self.name = name
        self.id_attr = id_attr
        self._entries: Dict[int, T] = {}
        self._lock = threading.RLock()

    def _next_id(self) -> int:
        # Caller holds the lock.
        return max(self._entries, default=0) + 1

    def put(self, entity: T) -> T:
        """Store a copy of ``entity``, assigning it an identity first if it has none.

        The identity is written back to ``entity`` itself; the return value is
        a copy of what was stored.
        """
        with self._lock:
            entity_id = getattr(entity, self.id_attr)
            if entity_id is None:
                entity_id = self._next_id()
                setattr(entity, self.id_attr, entity_id)
                logger.debug("Assigned %s id %s", self.name, entity_id)
            stored = copy_entity(entity)
            self._entries[entity_id] = stored
            return copy_entity(stored)

    def get(self, entity_id: int) -> Optional[T]:
        with self._lock:
            stored = self._entries.get(entity_id)
            return copy_entity(stored) if stored is not None else None

    def get_all(self) -> List[T]:
        """Copies of all entities in insertion order of their keys."""
        with self._lock:
            return [copy_entity(stored) for stored in self._entries.values()]

    def remove(self, entity_id: int) -> None:
        with self._lock:
            if self._entries.pop(entity_id, None) is not None:
                logger.debug("Removed %s id %s", self.name, entity_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, entity_id: object) -> bool:
        with self._lock:
            return entity_id in self._entries
