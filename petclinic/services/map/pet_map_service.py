"""Module: pet_map_service."""

from petclinic.db.models import Pet
from petclinic.services.base import PetService
from petclinic.services.map.abstract_map_service import AbstractMapService


class PetMapService(AbstractMapService[Pet], PetService):
    entity_name = "pet"

    def save(self, entity: Pet) -> Pet:
        # owner_id is what lookups follow, so keep it in step with an attached owner.
        if entity is not None and entity.owner is not None and entity.owner.id is not None:
            entity.owner_id = entity.owner.id
        return super().save(entity)
