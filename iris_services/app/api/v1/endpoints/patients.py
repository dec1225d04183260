"""
Patient routes for the local development server.

Forwarded to ``iris_services.app.functions.patients``.  Deletion is
reachable both as ``DELETE /patients?id=...`` (the deployed route) and
``DELETE /patients/{id}``.
"""

from fastapi import APIRouter, Request, Response

from iris_services.app.api.proxy import invoke
from iris_services.app.functions import patients as functions


router = APIRouter()


@router.post("")
async def create_patient(request: Request) -> Response:
    return await invoke(functions.create, request)


@router.get("")
async def list_patients(request: Request) -> Response:
    """List a client's patients; requires ``clientId``."""
    return await invoke(functions.get_all, request)


@router.get("/search")
async def search_patient(request: Request) -> Response:
    """Look up one patient by ``id`` or by ``docType`` + ``docNumber``."""
    return await invoke(functions.get, request)


@router.put("")
async def update_patient(request: Request) -> Response:
    return await invoke(functions.update, request)


@router.delete("")
async def delete_patient(request: Request) -> Response:
    return await invoke(functions.delete, request)


@router.delete("/{patient_id}")
async def delete_patient_by_path(patient_id: str, request: Request) -> Response:
    return await invoke(functions.delete, request, {"id": patient_id})
