# petclinic/db/models/__init__.py

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit
from petclinic.db.models.speciality import Speciality
from petclinic.db.models.vet import Vet, vet_specialties

__all__ = ["Owner", "Pet", "PetType", "Visit", "Speciality", "Vet", "vet_specialties"]
