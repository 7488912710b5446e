"""Module: owner_repository."""

from typing import List, Optional

from sqlalchemy import func, select

from petclinic.db.models import Owner
from petclinic.repositories.base import SqlAlchemyRepository
from petclinic.services.base import like_pattern_to_substring


class OwnerRepository(SqlAlchemyRepository[Owner]):
    model = Owner

    def find_by_last_name(self, last_name: str) -> Optional[Owner]:
        stmt = (
            select(Owner)
            .where(func.lower(Owner.last_name) == (last_name or "").lower())
            .order_by(Owner.id)
            .limit(1)
        )
        with self.session_factory() as session:
            return session.execute(stmt).scalars().first()

    def find_all_by_last_name_like(self, pattern: str) -> List[Owner]:
        # Outer % markers are dropped; autoescape keeps % and _ in the rest literal.
        needle = like_pattern_to_substring(pattern).lower()
        stmt = (
            select(Owner)
            .where(func.lower(func.coalesce(Owner.last_name, "")).contains(needle, autoescape=True))
            .order_by(Owner.id)
        )
        with self.session_factory() as session:
            return list(session.execute(stmt).scalars().all())
