"""Module: vet."""

from sqlalchemy import Column, ForeignKey, Table
from sqlalchemy.orm import Mapped, relationship

from petclinic.db.base import Base, Person
from petclinic.db.models.speciality import Speciality

# Many-to-many link between vets and the specialities they practise.
vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", ForeignKey("vets.id"), primary_key=True),
    Column("speciality_id", ForeignKey("specialties.id"), primary_key=True),
)


class Vet(Person):
    __tablename__ = "vets"

    specialities: Mapped[set[Speciality]] = relationship(
        secondary=vet_specialties,
        lazy="selectin",
    )

    @property
    def nr_of_specialities(self) -> int:
        return len(self.specialities)
