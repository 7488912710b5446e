"""Module: pets."""

from fastapi import APIRouter, Depends, HTTPException, Request

from petclinic.api.v1.routes.deps import get_owner_service, get_pet_service, get_pet_type_service
from petclinic.api.v1.routes.owners import redirect_to_owner
from petclinic.api.v1.schemas import PetForm, PetRead, PetTypeRead
from petclinic.db.models import Pet
from petclinic.services.base import OwnerService, PetService, PetTypeService
from petclinic.services.resolution import load_owner_with_pets

router = APIRouter()


# Endpoint: species a pet can be registered as.
@router.get("/pets/types", summary="List pet types")
def list_pet_types(pet_type_service: PetTypeService = Depends(get_pet_type_service)):
    return [PetTypeRead.model_validate(pet_type) for pet_type in pet_type_service.find_all()]


@router.get("/pets/{pet_id}", summary="Show pet")
def show_pet(pet_id: int, pet_service: PetService = Depends(get_pet_service)):
    pet = pet_service.find_by_id(pet_id)
    if pet is None:
        raise HTTPException(status_code=404, detail="Pet not found")
    return PetRead.model_validate(pet)


# Endpoint: register a new pet for an existing owner.
@router.post("/owners/{owner_id}/pets/new", summary="Add a pet to an owner")
def process_creation_form(
    request: Request,
    owner_id: int,
    form: PetForm,
    owner_service: OwnerService = Depends(get_owner_service),
    pet_service: PetService = Depends(get_pet_service),
    pet_type_service: PetTypeService = Depends(get_pet_type_service),
):
    details = load_owner_with_pets(owner_id, owner_service, pet_service)
    if details is None:
        raise HTTPException(status_code=404, detail="Owner not found")

    wanted_type = form.pet_type.strip().lower()
    pet_type = next(
        (t for t in pet_type_service.find_all() if (t.name or "").lower() == wanted_type),
        None,
    )
    if pet_type is None:
        raise HTTPException(status_code=400, detail=f"Unknown pet type: {form.pet_type}")

    if any((pet.name or "").lower() == form.name.lower() for pet in details.pets):
        raise HTTPException(status_code=409, detail="Owner already has a pet with this name")

    pet = Pet(name=form.name, birth_date=form.birth_date, pet_type=pet_type)
    pet.owner = details.owner
    pet_service.save(pet)
    return redirect_to_owner(request, owner_id)
