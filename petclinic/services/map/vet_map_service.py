"""Module: vet_map_service."""

from typing import Optional

from petclinic.db.models import Vet
from petclinic.services.base import SpecialityService, VetService
from petclinic.services.map.abstract_map_service import AbstractMapService
from petclinic.services.map.keyed_store import KeyedStore


class VetMapService(AbstractMapService[Vet], VetService):
    entity_name = "vet"

    def __init__(self, speciality_service: SpecialityService, store: Optional[KeyedStore[Vet]] = None):
        super().__init__(store)
        self.speciality_service = speciality_service

    def save(self, entity: Vet) -> Vet:
        if entity is not None:
            for speciality in entity.specialities:
                if speciality.is_new():
                    self.speciality_service.save(speciality)
        return super().save(entity)
