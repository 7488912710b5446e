"""Module: deps."""

from fastapi import Depends, Request

from petclinic.services.base import (
    OwnerService,
    PetService,
    PetTypeService,
    VetService,
    VisitService,
)
from petclinic.services.registry import ServiceRegistry


# The registry is built once per application in create_app.
def get_services(request: Request) -> ServiceRegistry:
    return request.app.state.services


def get_owner_service(services: ServiceRegistry = Depends(get_services)) -> OwnerService:
    return services.owners


def get_pet_service(services: ServiceRegistry = Depends(get_services)) -> PetService:
    return services.pets


def get_pet_type_service(services: ServiceRegistry = Depends(get_services)) -> PetTypeService:
    return services.pet_types


def get_visit_service(services: ServiceRegistry = Depends(get_services)) -> VisitService:
    return services.visits


def get_vet_service(services: ServiceRegistry = Depends(get_services)) -> VetService:
    return services.vets
