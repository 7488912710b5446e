"""Module: registry."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import sessionmaker

from petclinic.core.config import Settings
from petclinic.db.init_db import init_db
from petclinic.db.session import make_engine, make_session_factory
from petclinic.repositories.owner_repository import OwnerRepository
from petclinic.repositories.repositories import (
    PetRepository,
    PetTypeRepository,
    SpecialityRepository,
    VetRepository,
    VisitRepository,
)
from petclinic.services.base import (
    OwnerService,
    PetService,
    PetTypeService,
    SpecialityService,
    VetService,
    VisitService,
)
from petclinic.services.map.keyed_store import KeyedStore
from petclinic.services.map.owner_map_service import OwnerMapService
from petclinic.services.map.pet_map_service import PetMapService
from petclinic.services.map.pet_type_map_service import PetTypeMapService
from petclinic.services.map.speciality_map_service import SpecialityMapService
from petclinic.services.map.vet_map_service import VetMapService
from petclinic.services.map.visit_map_service import VisitMapService
from petclinic.services.orm.services import (
    OwnerOrmService,
    PetOrmService,
    PetTypeOrmService,
    SpecialityOrmService,
    VetOrmService,
    VisitOrmService,
)

logger = logging.getLogger(__name__)


# One service per entity type, all sharing the same backend.
@dataclass
class ServiceRegistry:
    owners: OwnerService
    pets: PetService
    pet_types: PetTypeService
    visits: VisitService
    vets: VetService
    specialities: SpecialityService


def build_map_services() -> ServiceRegistry:
    """In-memory services; each one gets its own fresh KeyedStore."""
    pet_types = PetTypeMapService(KeyedStore("pet type"))
    pets = PetMapService(KeyedStore("pet"))
    specialities = SpecialityMapService(KeyedStore("speciality"))
    return ServiceRegistry(
        owners=OwnerMapService(pet_type_service=pet_types, pet_service=pets, store=KeyedStore("owner")),
        pets=pets,
        pet_types=pet_types,
        visits=VisitMapService(pet_service=pets, store=KeyedStore("visit")),
        vets=VetMapService(speciality_service=specialities, store=KeyedStore("vet")),
        specialities=specialities,
    )


def build_orm_services(session_factory: sessionmaker) -> ServiceRegistry:
    return ServiceRegistry(
        owners=OwnerOrmService(OwnerRepository(session_factory)),
        pets=PetOrmService(PetRepository(session_factory)),
        pet_types=PetTypeOrmService(PetTypeRepository(session_factory)),
        visits=VisitOrmService(VisitRepository(session_factory)),
        vets=VetOrmService(VetRepository(session_factory)),
        specialities=SpecialityOrmService(SpecialityRepository(session_factory)),
    )


def build_services(settings: Settings) -> ServiceRegistry:
    if settings.storage_backend == "sqlalchemy":
        engine = make_engine(settings.database_url)
        logger.info("Using database storage at %s", engine.url)
        init_db(engine)
        return build_orm_services(make_session_factory(engine))

    logger.info("Using in-memory storage")
    return build_map_services()
