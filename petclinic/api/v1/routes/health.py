"""Module: health."""

from fastapi import APIRouter, Request

router = APIRouter()


# Endpoint: lightweight health probe reporting the active storage backend.
@router.get("/health")
def health(request: Request):
    return {"status": "ok", "storage": request.app.state.settings.storage_backend}
