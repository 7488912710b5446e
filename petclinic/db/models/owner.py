"""Module: owner."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import Person

if TYPE_CHECKING:
    from petclinic.db.models.pet import Pet


class Owner(Person):
    __tablename__ = "owners"

    address: Mapped[str] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(80), nullable=True)
    telephone: Mapped[str] = mapped_column(String(20), nullable=True)

    # Pets are not deleted with their owner.
    pets: Mapped[list["Pet"]] = relationship(
        back_populates="owner",
        lazy="selectin",
        order_by="Pet.id",
    )
