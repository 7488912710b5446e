"""Module: owner_map_service."""

import logging
from typing import List, Optional

from petclinic.db.models import Owner
from petclinic.services.base import OwnerService, PetService, PetTypeService, like_pattern_to_substring
from petclinic.services.map.abstract_map_service import AbstractMapService
from petclinic.services.map.keyed_store import KeyedStore

logger = logging.getLogger(__name__)


class OwnerMapService(AbstractMapService[Owner], OwnerService):
    entity_name = "owner"

    def __init__(
        self,
        pet_type_service: PetTypeService,
        pet_service: PetService,
        store: Optional[KeyedStore[Owner]] = None,
    ):
        super().__init__(store)
        self.pet_type_service = pet_type_service
        self.pet_service = pet_service

    def save(self, entity: Owner) -> Owner:
        if entity is None:
            return super().save(entity)

        for pet in entity.pets:
            if pet.pet_type is not None and pet.pet_type.is_new():
                pet.pet_type = self.pet_type_service.save(pet.pet_type)

        saved = super().save(entity)
        # New pets ride along with their owner, as do pets moving over from another owner.
        for pet in entity.pets:
            if pet.is_new() or pet.owner_id != entity.id:
                pet.owner_id = entity.id
                self.pet_service.save(pet)
        return saved

    def find_by_last_name(self, last_name: str) -> Optional[Owner]:
        wanted = (last_name or "").lower()
        for owner in self.find_all():
            if (owner.last_name or "").lower() == wanted:
                return owner
        return None

    def find_all_by_last_name_like(self, pattern: str) -> List[Owner]:
        needle = like_pattern_to_substring(pattern).lower()
        matches = [
            owner for owner in self.find_all()
            if needle in (owner.last_name or "").lower()
        ]
        logger.debug("Last name pattern %r matched %d owner(s)", pattern, len(matches))
        return matches
