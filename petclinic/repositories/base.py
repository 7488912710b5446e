"""
SQLAlchemy repositories backing the database service family.

Every call opens its own session from the injected ``sessionmaker`` and
closes it before returning, so entities handed back are detached.  The
factory is expected to use ``expire_on_commit=False`` and the models load
their collections eagerly, which keeps detached entities readable.

Database errors are not caught here: a failing engine surfaces as the
``SQLAlchemyError`` the driver raised.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyRepository(Generic[T]):
    model: Type[T]

    def __init__(self, session_factory: sessionmaker, model: Optional[Type[T]] = None):
        self.session_factory = session_factory
        if model is not None:
            self.model = model

    def find_all(self) -> List[T]:
        with self.session_factory() as session:
            return list(session.execute(select(self.model).order_by(self.model.id)).scalars().all())

    def find_by_id(self, id: int) -> Optional[T]:
        with self.session_factory() as session:
            return session.get(self.model, id)

    def save(self, entity: T) -> T:
        with self.session_factory() as session:
            merged = session.merge(entity)
            session.commit()
            session.refresh(merged)
        if entity.id is None:
            entity.id = merged.id
        logger.debug("Saved %s id %s", self.model.__name__, merged.id)
        return merged

    def delete_by_id(self, id: int) -> None:
        with self.session_factory() as session:
            instance = session.get(self.model, id)
            if instance is None:
                return
            session.delete(instance)
            session.commit()
        logger.debug("Deleted %s id %s", self.model.__name__, id)
