"""Module: pet."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import BaseEntity
from petclinic.db.models.pet_type import PetType

if TYPE_CHECKING:
    from petclinic.db.models.owner import Owner
    from petclinic.db.models.visit import Visit


# Core pet profile; owner_id is the reference used for owner lookups.
class Pet(BaseEntity):
    __tablename__ = "pets"

    name: Mapped[str] = mapped_column(String(30), nullable=True)
    birth_date: Mapped[date] = mapped_column(Date, nullable=True)

    type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), nullable=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("owners.id"), nullable=True)

    pet_type: Mapped[PetType] = relationship(lazy="joined")
    owner: Mapped["Owner"] = relationship(back_populates="pets")
    visits: Mapped[list["Visit"]] = relationship(
        back_populates="pet",
        lazy="selectin",
        order_by="Visit.id",
    )
