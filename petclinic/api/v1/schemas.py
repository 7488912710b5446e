"""Module: schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


# -------------------------
# Read models (serialize ORM entities)
# -------------------------
class PetTypeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class VisitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    visit_date: date | None = None
    description: str | None = None
    pet_id: int | None = None


class PetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    name: str | None = None
    birth_date: date | None = None
    owner_id: int | None = None
    pet_type: PetTypeRead | None = None
    visits: list[VisitRead] = []


class OwnerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    telephone: str | None = None


class OwnerDetailsRead(OwnerRead):
    pets: list[PetRead] = []


class SpecialityRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    description: str | None = None


class VetRead(BaseModel):
    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    specialities: list[SpecialityRead] = []


# -------------------------
# Forms (validated before any service call)
# -------------------------
class OwnerForm(BaseModel):
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    address: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=80)
    telephone: str = Field(pattern=r"^\d{1,10}$")


class PetForm(BaseModel):
    name: str = Field(min_length=1, max_length=30)
    birth_date: date | None = None
    pet_type: str = Field(min_length=1, max_length=80)


class VisitForm(BaseModel):
    visit_date: date | None = None
    description: str = Field(min_length=1, max_length=255)
