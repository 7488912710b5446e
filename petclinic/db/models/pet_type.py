"""Module: pet_type."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import BaseEntity


# Lookup table of species (Dog, Cat, ...) a pet can be registered as.
class PetType(BaseEntity):
    __tablename__ = "types"

    name: Mapped[str] = mapped_column(String(80), nullable=False)
