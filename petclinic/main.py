"""Module: main."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from petclinic.api.v1.api import api_router
from petclinic.core.config import Settings, settings as default_settings
from petclinic.core.exceptions import InvalidEntityError
from petclinic.core.logging_config import setup_logging
from petclinic.scripts.seed_data import load_sample_data
from petclinic.services.registry import ServiceRegistry, build_services

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, services: ServiceRegistry | None = None) -> FastAPI:
    """Build the API with its own service registry.

    ``services`` replaces the registry built from ``settings``; tests use it
    to run the routes against a prepared store.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="Pet Clinic API", version="0.1.0")
    app.state.settings = settings
    app.state.services = services if services is not None else build_services(settings)

    if services is None and settings.load_sample_data:
        load_sample_data(app.state.services)

    app.include_router(api_router, prefix="/api/v1")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Structural save rejections are client errors, not server faults.
    @app.exception_handler(InvalidEntityError)
    async def invalid_entity_handler(request: Request, exc: InvalidEntityError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    logger.info("Pet Clinic API ready (storage=%s)", settings.storage_backend)
    return app


app = create_app()
