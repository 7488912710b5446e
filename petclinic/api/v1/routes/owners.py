"""Module: owners."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse

from petclinic.api.v1.routes.deps import get_owner_service, get_pet_service
from petclinic.api.v1.schemas import OwnerDetailsRead, OwnerForm, OwnerRead, PetRead
from petclinic.db.models import Owner
from petclinic.services.base import OwnerService, PetService
from petclinic.services.resolution import load_owner_with_pets

router = APIRouter()

FIND_OWNERS_VIEW = "owners/findOwners"
OWNERS_LIST_VIEW = "owners/ownersList"
OWNER_DETAILS_VIEW = "owners/ownerDetails"
CREATE_OR_UPDATE_OWNER_FORM = "owners/createOrUpdateOwnerForm"


def redirect_to_owner(request: Request, owner_id: int) -> RedirectResponse:
    return RedirectResponse(str(request.url_for("show_owner", owner_id=owner_id)), status_code=303)


# Endpoint: empty search form.
@router.get("/find", summary="Find owners form")
def init_find_form():
    return {"view": FIND_OWNERS_VIEW, "owner": OwnerRead()}


# Endpoint: last-name search; the number of matches picks the response.
@router.get("", summary="Find owners by last name")
def process_find_form(
    request: Request,
    last_name: str = "",
    owner_service: OwnerService = Depends(get_owner_service),
):
    # No parameter means an empty substring, which matches every owner.
    results = owner_service.find_all_by_last_name_like(f"%{last_name}%")

    if not results:
        return {
            "view": FIND_OWNERS_VIEW,
            "owner": OwnerRead(last_name=last_name),
            "errors": {"last_name": "not found"},
        }
    if len(results) == 1:
        return redirect_to_owner(request, results[0].id)
    return {
        "view": OWNERS_LIST_VIEW,
        "selections": [OwnerRead.model_validate(owner) for owner in results],
    }


# Endpoint: empty creation form.
@router.get("/new", summary="New owner form")
def init_creation_form():
    return {"view": CREATE_OR_UPDATE_OWNER_FORM, "owner": OwnerRead()}


# Endpoint: create an owner from a validated form.
@router.post("/new", summary="Create an owner")
def process_creation_form(
    request: Request,
    form: OwnerForm,
    owner_service: OwnerService = Depends(get_owner_service),
):
    saved = owner_service.save(Owner(**form.model_dump()))
    return redirect_to_owner(request, saved.id)


# Endpoint: owner profile with the pets that reference it.
@router.get("/{owner_id}", summary="Show owner")
def show_owner(
    owner_id: int,
    owner_service: OwnerService = Depends(get_owner_service),
    pet_service: PetService = Depends(get_pet_service),
):
    details = load_owner_with_pets(owner_id, owner_service, pet_service)
    if details is None:
        raise HTTPException(status_code=404, detail="Owner not found")

    owner = OwnerDetailsRead(
        **OwnerRead.model_validate(details.owner).model_dump(),
        pets=[PetRead.model_validate(pet) for pet in details.pets],
    )
    return {"view": OWNER_DETAILS_VIEW, "owner": owner}


# Endpoint: update form pre-filled from the stored owner.
@router.get("/{owner_id}/edit", summary="Edit owner form")
def init_update_owner_form(owner_id: int, owner_service: OwnerService = Depends(get_owner_service)):
    owner = owner_service.find_by_id(owner_id)
    if owner is None:
        raise HTTPException(status_code=404, detail="Owner not found")
    return {"view": CREATE_OR_UPDATE_OWNER_FORM, "owner": OwnerRead.model_validate(owner)}


# Endpoint: re-save the owner under the id taken from the path.
@router.post("/{owner_id}/edit", summary="Update an owner")
def process_update_owner_form(
    request: Request,
    owner_id: int,
    form: OwnerForm,
    owner_service: OwnerService = Depends(get_owner_service),
):
    owner = Owner(**form.model_dump())
    owner.id = owner_id
    saved = owner_service.save(owner)
    return redirect_to_owner(request, saved.id)
