"""Module: visit_map_service."""

from typing import Optional

from petclinic.db.models import Visit
from petclinic.services.base import PetService, VisitService, require_visit_pet
from petclinic.services.map.abstract_map_service import AbstractMapService
from petclinic.services.map.keyed_store import KeyedStore


class VisitMapService(AbstractMapService[Visit], VisitService):
    entity_name = "visit"

    def __init__(self, pet_service: PetService, store: Optional[KeyedStore[Visit]] = None):
        super().__init__(store)
        self.pet_service = pet_service

    def save(self, entity: Visit) -> Visit:
        if entity is None:
            return super().save(entity)

        pet = require_visit_pet(entity)
        entity.pet_id = pet.id
        saved = super().save(entity)
        # The pet store holds its own copy of the pet; re-save it so that copy lists this visit.
        if not any(visit.id == entity.id for visit in pet.visits):
            pet.visits.append(entity)
        self.pet_service.save(pet)
        return saved
