"""Module: visit."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import BaseEntity

if TYPE_CHECKING:
    from petclinic.db.models.pet import Pet


# Clinical visit record for a pet.
class Visit(BaseEntity):
    __tablename__ = "visits"

    visit_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    description: Mapped[str] = mapped_column(String(255), nullable=True)
    pet_id: Mapped[int] = mapped_column(ForeignKey("pets.id"), nullable=True)

    pet: Mapped["Pet"] = relationship(back_populates="visits")

    def __init__(self, **kwargs):
        # The column default only fires on flush; in-memory visits need the date up front.
        kwargs.setdefault("visit_date", date.today())
        super().__init__(**kwargs)
