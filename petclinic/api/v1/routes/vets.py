"""Module: vets."""

from fastapi import APIRouter, Depends

from petclinic.api.v1.routes.deps import get_vet_service
from petclinic.api.v1.schemas import SpecialityRead, VetRead
from petclinic.services.base import VetService

router = APIRouter()

VETS_VIEW = "vets/index"


# Endpoint: every vet with their specialities sorted by name.
@router.get("", summary="List vets")
def list_vets(vet_service: VetService = Depends(get_vet_service)):
    vets = []
    for vet in vet_service.find_all():
        specialities = sorted(vet.specialities, key=lambda s: s.description or "")
        vets.append(
            VetRead(
                id=vet.id,
                first_name=vet.first_name,
                last_name=vet.last_name,
                specialities=[SpecialityRead.model_validate(s) for s in specialities],
            )
        )
    return {"view": VETS_VIEW, "vets": vets}
