"""
Wiring of services for the Lambda functions.

Services are built on first use and cached for the lifetime of the
container, so warm invocations reuse the boto3 resource and its
connection pool.  Tests replace :func:`appointment_service` and
:func:`patient_service` on the function modules, or call
``cache_clear()`` after changing settings.
"""

from functools import lru_cache

from iris_services.app.core.config import settings
from iris_services.app.core.db import get_table
from iris_services.app.core.logging_config import setup_logging
from iris_services.app.repositories import AppointmentRepository, PatientRepository
from iris_services.app.services.appointment_service import AppointmentService
from iris_services.app.services.patient_service import PatientService


@lru_cache(maxsize=None)
def appointment_service() -> AppointmentService:
    setup_logging(settings.log_level)
    repository = AppointmentRepository(
        get_table(settings.appointments_table),
        client_id_index=settings.client_id_index,
        patient_id_index=settings.patient_id_index,
        doctor_id_index=settings.doctor_id_index,
    )
    return AppointmentService(repository)


@lru_cache(maxsize=None)
def patient_service() -> PatientService:
    setup_logging(settings.log_level)
    repository = PatientRepository(
        get_table(settings.patients_table),
        client_id_index=settings.client_id_index,
        doc_key_index=settings.doc_key_index,
    )
    return PatientService(repository)
