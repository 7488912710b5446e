"""Module: speciality_map_service."""

from petclinic.db.models import Speciality
from petclinic.services.base import SpecialityService
from petclinic.services.map.abstract_map_service import AbstractMapService


class SpecialityMapService(AbstractMapService[Speciality], SpecialityService):
    entity_name = "speciality"
