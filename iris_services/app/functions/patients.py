"""
Lambda entry points for patients.

Handler strings are ``iris_services.app.functions.patients.<name>``.
Patients are looked up by query string (``id``, or ``docType`` and
``docNumber`` together); ``delete`` accepts the id either as a path
parameter or in the query string.
"""

import logging
from typing import Any, Dict

from iris_services.app.core.exceptions import ValidationError
from iris_services.app.functions.dependencies import patient_service
from iris_services.app.functions.gateway import (
    gateway_function,
    json_response,
    parse_body,
    path_param,
    query_param,
)
from iris_services.app.schemas.patient import GetPatientRequest, PatientRequest


logger = logging.getLogger(__name__)


@gateway_function("could not create patient")
def create(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    request = parse_body(event, PatientRequest)
    logger.info("Creating patient for client %s", request.client_id)
    created = patient_service().create_patient(request)
    return json_response(201, created)


@gateway_function("could not retrieve patient")
def get(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    params = GetPatientRequest(
        id=query_param(event, "id") or path_param(event, "id"),
        doc_type=query_param(event, "docType"),
        doc_number=query_param(event, "docNumber"),
    )
    if not params.id and not (params.doc_type and params.doc_number):
        raise ValidationError("missing required parameters")
    patient = patient_service().get_patient(params)
    return json_response(200, patient)


@gateway_function("could not retrieve patients")
def get_all(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    client_id = query_param(event, "clientId")
    if not client_id:
        raise ValidationError("missing clientId parameter")
    patients = patient_service().get_all_patients(client_id)
    return json_response(200, patients)


@gateway_function("could not update patient")
def update(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    request = parse_body(event, PatientRequest)
    if not request.id:
        raise ValidationError("patient ID is required for update")
    updated = patient_service().update_patient(request)
    return json_response(200, updated)


@gateway_function("could not delete patient")
def delete(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    patient_id = path_param(event, "id") or query_param(event, "id")
    if not patient_id:
        raise ValidationError("patient ID is required for deletion")
    patient_service().delete_patient(patient_id)
    return json_response(204)
