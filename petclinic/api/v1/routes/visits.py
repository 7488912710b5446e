"""Module: visits."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request

from petclinic.api.v1.routes.deps import get_owner_service, get_pet_service, get_visit_service
from petclinic.api.v1.routes.owners import redirect_to_owner
from petclinic.api.v1.schemas import OwnerRead, PetRead, VisitForm, VisitRead
from petclinic.services.base import OwnerService, PetService, VisitService
from petclinic.services.resolution import ResolvedVisit, load_pet_with_visit

router = APIRouter()

VISIT_FORM_VIEW = "pets/createOrUpdateVisitForm"


def _resolve_or_404(pet_id: int, pet_service: PetService, owner_service: OwnerService) -> ResolvedVisit:
    resolved = load_pet_with_visit(pet_id, pet_service, owner_service)
    if resolved is None:
        raise HTTPException(status_code=404, detail="Pet not found")
    return resolved


# Endpoint: visit form for a pet, with the pet's owner resolved by id.
# The owner id in the path is informational; the pet's own reference is followed.
@router.get("/owners/{owner_id}/pets/{pet_id}/visits/new", summary="New visit form")
def init_new_visit_form(
    owner_id: int,
    pet_id: int,
    pet_service: PetService = Depends(get_pet_service),
    owner_service: OwnerService = Depends(get_owner_service),
):
    resolved = _resolve_or_404(pet_id, pet_service, owner_service)
    return {
        "view": VISIT_FORM_VIEW,
        "pet": PetRead.model_validate(resolved.pet),
        "owner": OwnerRead.model_validate(resolved.owner) if resolved.has_owner else None,
        "visit": VisitRead.model_validate(resolved.visit),
    }


# Endpoint: record a visit for a pet whose owner still exists.
@router.post("/owners/{owner_id}/pets/{pet_id}/visits/new", summary="Create a visit")
def process_new_visit_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    form: VisitForm,
    pet_service: PetService = Depends(get_pet_service),
    owner_service: OwnerService = Depends(get_owner_service),
    visit_service: VisitService = Depends(get_visit_service),
):
    resolved = _resolve_or_404(pet_id, pet_service, owner_service)
    if not resolved.has_owner:
        raise HTTPException(status_code=409, detail="Pet's owner no longer exists")

    visit = resolved.visit
    visit.visit_date = form.visit_date or date.today()
    visit.description = form.description.strip()
    visit.pet = resolved.pet
    visit_service.save(visit)
    return redirect_to_owner(request, resolved.owner.id)
