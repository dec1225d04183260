"""
Lambda entry points for appointments.

One handler per operation, each deployed as its own function behind
API Gateway (handler string ``iris_services.app.functions.appointments.<name>``):

* ``create``  - ``POST``   JSON body, 201 with the echoed payload
* ``get``     - ``GET``    path or query ``id``, or query ``patientId``/``doctorId``
* ``get_all`` - ``GET``    query ``clientId``, 200 with a JSON array
* ``update``  - ``PUT``    JSON body including ``id``
* ``delete``  - ``DELETE`` path ``id``, 204 without body

Status values are checked here, before the service is called, so an
invalid status never reaches the store.
"""

import logging
from typing import Any, Dict

from iris_services.app.core.exceptions import ValidationError
from iris_services.app.functions.dependencies import appointment_service
from iris_services.app.functions.gateway import (
    gateway_function,
    json_response,
    parse_body,
    path_param,
    query_param,
)
from iris_services.app.schemas.appointment import (
    AppointmentRequest,
    GetAppointmentRequest,
    validate_status,
)


logger = logging.getLogger(__name__)


@gateway_function("could not create appointment")
def create(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    request = parse_body(event, AppointmentRequest)
    logger.info("Creating appointment for client %s", request.client_id)
    validate_status(request.status)
    created = appointment_service().create_appointment(request)
    return json_response(201, created)


@gateway_function("could not retrieve appointment")
def get(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    params = GetAppointmentRequest(
        id=path_param(event, "id") or query_param(event, "id"),
        client_id=query_param(event, "clientId"),
        patient_id=query_param(event, "patientId"),
        doctor_id=query_param(event, "doctorId"),
    )
    if not (params.id or params.client_id or params.patient_id or params.doctor_id):
        raise ValidationError("at least one search parameter is required")
    logger.info("Getting appointment with params %s", params.model_dump(exclude_defaults=True))
    appointment = appointment_service().get_appointment(params)
    return json_response(200, appointment)


@gateway_function("could not retrieve appointments")
def get_all(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    client_id = query_param(event, "clientId")
    if not client_id:
        raise ValidationError("missing clientId parameter")
    appointments = appointment_service().get_all_appointments(client_id)
    return json_response(200, appointments)


@gateway_function("could not update appointment")
def update(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    request = parse_body(event, AppointmentRequest)
    if not request.id:
        raise ValidationError("missing appointment ID")
    logger.info("Updating appointment %s", request.id)
    validate_status(request.status)
    updated = appointment_service().update_appointment(request)
    return json_response(200, updated)


@gateway_function("could not delete appointment")
def delete(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    appointment_id = path_param(event, "id") or query_param(event, "id")
    if not appointment_id:
        raise ValidationError("missing appointment ID")
    appointment_service().delete_appointment(appointment_id)
    return json_response(204)
