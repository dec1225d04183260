"""
Appointment routes for the local development server.

Each route forwards to the Lambda function of the same operation in
``iris_services.app.functions.appointments``.  Request validation,
status codes and error bodies are therefore exactly those of the
deployed functions.
"""

from fastapi import APIRouter, Request, Response

from iris_services.app.api.proxy import invoke
from iris_services.app.functions import appointments as functions


router = APIRouter()


@router.post("")
async def create_appointment(request: Request) -> Response:
    """Create an appointment (201, echoes the payload)."""
    return await invoke(functions.create, request)


@router.get("")
async def list_appointments(request: Request) -> Response:
    """List a client's appointments; requires ``clientId``."""
    return await invoke(functions.get_all, request)


@router.get("/search")
async def search_appointment(request: Request) -> Response:
    """Return the first appointment matching ``id``, ``patientId`` or ``doctorId``."""
    return await invoke(functions.get, request)


@router.get("/{appointment_id}")
async def get_appointment(appointment_id: str, request: Request) -> Response:
    return await invoke(functions.get, request, {"id": appointment_id})


@router.put("")
async def update_appointment(request: Request) -> Response:
    return await invoke(functions.update, request)


@router.delete("/{appointment_id}")
async def delete_appointment(appointment_id: str, request: Request) -> Response:
    return await invoke(functions.delete, request, {"id": appointment_id})
