"""Module: speciality."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import BaseEntity


class Speciality(BaseEntity):
    __tablename__ = "specialties"

    description: Mapped[str] = mapped_column(String(80), nullable=True)
