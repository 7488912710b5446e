"""Module: orm_crud_service."""

from typing import List, Optional, TypeVar

from petclinic.repositories.base import SqlAlchemyRepository
from petclinic.services.base import CrudService

T = TypeVar("T")


# Delegates straight to a repository; repository errors reach the caller untouched.
class OrmCrudService(CrudService[T, int]):
    def __init__(self, repository: SqlAlchemyRepository[T]):
        self.repository = repository

    def find_all(self) -> List[T]:
        return list(self.repository.find_all())

    def find_by_id(self, id: int) -> Optional[T]:
        return self.repository.find_by_id(id)

    def save(self, entity: T) -> T:
        if entity is None:
            raise ValueError("Cannot save an empty entity")
        return self.repository.save(entity)

    def delete(self, entity: T) -> None:
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            return
        self.delete_by_id(entity_id)

    def delete_by_id(self, id: int) -> None:
        self.repository.delete_by_id(id)
