"""Module: base."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Shared SQLAlchemy declarative base that all ORM models inherit from.
# This gives each model access to common metadata for table creation.
class Base(DeclarativeBase):
    pass


# Integer identity shared by every entity; None until the first save.
class BaseEntity(Base):
    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def is_new(self) -> bool:
        return self.id is None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


class Person(BaseEntity):
    __abstract__ = True

    first_name: Mapped[str] = mapped_column(String(30), nullable=True)
    last_name: Mapped[str] = mapped_column(String(30), nullable=True)
