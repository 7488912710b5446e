"""Module: services."""

from typing import List, Optional

from petclinic.db.models import Owner, Pet, PetType, Speciality, Vet, Visit
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.services.base import (
    OwnerService,
    PetService,
    PetTypeService,
    SpecialityService,
    VetService,
    VisitService,
    require_visit_pet,
)
from petclinic.services.orm.orm_crud_service import OrmCrudService


class OwnerOrmService(OrmCrudService[Owner], OwnerService):
    repository: OwnerRepository

    def find_by_last_name(self, last_name: str) -> Optional[Owner]:
        return self.repository.find_by_last_name(last_name)

    def find_all_by_last_name_like(self, pattern: str) -> List[Owner]:
        return list(self.repository.find_all_by_last_name_like(pattern))


class PetOrmService(OrmCrudService[Pet], PetService):
    pass


class PetTypeOrmService(OrmCrudService[PetType], PetTypeService):
    pass


class VisitOrmService(OrmCrudService[Visit], VisitService):
    def save(self, entity: Visit) -> Visit:
        if entity is not None:
            entity.pet_id = require_visit_pet(entity).id
        return super().save(entity)


class VetOrmService(OrmCrudService[Vet], VetService):
    pass


class SpecialityOrmService(OrmCrudService[Speciality], SpecialityService):
    pass
