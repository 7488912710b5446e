"""
Composite views assembled by following id references between entities.

Both helpers do independent single-entity lookups.  An owner deleted
between the two lookups (or long before) shows up as ``owner=None`` on the
result rather than as an error; callers decide what to do with it.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from petclinic.db.models import Owner, Pet, Visit
from petclinic.services.base import OwnerService, PetService

logger = logging.getLogger(__name__)


@dataclass
class ResolvedVisit:
    """A pet, a new unsaved visit for it, and the pet's owner if it still exists.

    The visit only carries ``pet_id``; attach ``pet`` to it right before saving so
    an abandoned form never shows up in the stored pet's visits.
    """

    pet: Pet
    visit: Visit
    owner: Optional[Owner] = None

    @property
    def has_owner(self) -> bool:
        return self.owner is not None


@dataclass
class OwnerDetails:
    owner: Owner
    pets: List[Pet] = field(default_factory=list)


def load_pet_with_visit(
    pet_id: int,
    pet_service: PetService,
    owner_service: OwnerService,
) -> Optional[ResolvedVisit]:
    """Load pet ``pet_id`` and start a visit for it.

    Returns None when the pet does not exist.
    """
    pet = pet_service.find_by_id(pet_id)
    if pet is None:
        return None

    visit = Visit(pet_id=pet.id)

    owner = None
    if pet.owner_id is not None:
        owner = owner_service.find_by_id(pet.owner_id)
        if owner is None:
            logger.info("Pet %s refers to missing owner %s", pet.id, pet.owner_id)
    return ResolvedVisit(pet=pet, visit=visit, owner=owner)


def load_owner_with_pets(
    owner_id: int,
    owner_service: OwnerService,
    pet_service: PetService,
) -> Optional[OwnerDetails]:
    owner = owner_service.find_by_id(owner_id)
    if owner is None:
        return None
    pets = [pet for pet in pet_service.find_all() if pet.owner_id == owner.id]
    return OwnerDetails(owner=owner, pets=pets)
