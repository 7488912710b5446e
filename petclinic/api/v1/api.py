"""Module: api."""

from fastapi import APIRouter

# Operational routes.
from petclinic.api.v1.routes.health import router as health_router

# Clinic routes.
from petclinic.api.v1.routes.owners import router as owners_router
from petclinic.api.v1.routes.pets import router as pets_router
from petclinic.api.v1.routes.visits import router as visits_router
from petclinic.api.v1.routes.vets import router as vets_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])

# Pet and visit paths nest under /owners/..., so those routers carry full paths.
api_router.include_router(owners_router, prefix="/owners", tags=["owners"])
api_router.include_router(pets_router, tags=["pets"])
api_router.include_router(visits_router, tags=["visits"])
api_router.include_router(vets_router, prefix="/vets", tags=["vets"])
