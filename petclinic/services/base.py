"""
Service capabilities shared by every storage backend.

Each entity type gets one ``CrudService`` subclass; the map backend and the
database backend both implement these, and the HTTP layer only ever sees
the abstract types, so tests can hand it ``create_autospec`` doubles.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from petclinic.core.exceptions import InvalidEntityError
from petclinic.db.models import Owner, Pet, PetType, Speciality, Vet, Visit

T = TypeVar("T")
ID = TypeVar("ID")

WILDCARD = "%"


def like_pattern_to_substring(pattern: str) -> str:
    """Drop the ``%`` markers wrapped around a last-name search pattern.

    What is left is matched as a plain substring; inner ``%`` and ``_`` are
    literal characters, whichever backend runs the search.
    """
    return (pattern or "").strip(WILDCARD)


def require_visit_pet(visit: Visit) -> Pet:
    """Return the pet a visit is for, rejecting visits no pet with an owner backs."""
    pet = visit.pet
    if pet is None or pet.is_new() or pet.owner_id is None:
        raise InvalidEntityError("Invalid Visit: a visit needs a saved pet with an owner", visit)
    return pet


class CrudService(ABC, Generic[T, ID]):
    @abstractmethod
    def find_all(self) -> List[T]:
        ...

    @abstractmethod
    def find_by_id(self, id: ID) -> Optional[T]:
        """Return the entity stored under ``id``, or None."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Store ``entity`` and return it with its identity populated."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        ...

    @abstractmethod
    def delete_by_id(self, id: ID) -> None:
        ...


class OwnerService(CrudService[Owner, int]):
    @abstractmethod
    def find_by_last_name(self, last_name: str) -> Optional[Owner]:
        """First owner whose last name equals ``last_name``, ignoring case."""

    @abstractmethod
    def find_all_by_last_name_like(self, pattern: str) -> List[Owner]:
        """Owners whose last name contains ``pattern`` with its ``%`` markers removed.

        Matching ignores case.  ``"%%"`` matches every owner, and a pattern
        nobody matches gives an empty list.
        """


class PetService(CrudService[Pet, int]):
    pass


class PetTypeService(CrudService[PetType, int]):
    pass


class VisitService(CrudService[Visit, int]):
    pass


class VetService(CrudService[Vet, int]):
    pass


class SpecialityService(CrudService[Speciality, int]):
    pass
