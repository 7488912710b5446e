"""Module: pet_type_map_service."""

from petclinic.db.models import PetType
from petclinic.services.base import PetTypeService
from petclinic.services.map.abstract_map_service import AbstractMapService


class PetTypeMapService(AbstractMapService[PetType], PetTypeService):
    entity_name = "pet type"
