"""Module: repositories."""

from petclinic.db.models import Pet, PetType, Speciality, Vet, Visit
from petclinic.repositories.base import SqlAlchemyRepository


class PetRepository(SqlAlchemyRepository[Pet]):
    model = Pet


class PetTypeRepository(SqlAlchemyRepository[PetType]):
    model = PetType


class VisitRepository(SqlAlchemyRepository[Visit]):
    model = Visit


class VetRepository(SqlAlchemyRepository[Vet]):
    model = Vet


class SpecialityRepository(SqlAlchemyRepository[Speciality]):
    model = Speciality
