"""
Business logic for appointments.

``AppointmentService`` sits between the Lambda functions and the
repository.  It resolves lookups by parameter priority, maps between
the wire model and the storage model, generates identifiers and stamps
timestamps.

Lookup priority for :meth:`AppointmentService.get_appointment` is
``id``, then ``patient_id``, then ``doctor_id``.  The secondary lookups
can match many appointments; only the first is returned and a warning
is logged when others were dropped.  Use
:meth:`AppointmentService.get_all_appointments` for listings.
"""

import logging
from typing import Callable, List

from iris_services.app.core.exceptions import (
    InvalidParametersError,
    NotFoundError,
    RepositoryError,
    ServiceError,
    ValidationError,
)
from iris_services.app.core.utils import new_id, utc_now
from iris_services.app.repositories.appointment_repository import AppointmentRepository
from iris_services.app.schemas.appointment import (
    Appointment,
    AppointmentRequest,
    GetAppointmentRequest,
    validate_status,
)


logger = logging.getLogger(__name__)


class AppointmentService:
    """Service for creating, reading, updating and deleting appointments."""

    def __init__(
        self,
        repository: AppointmentRepository,
        clock: Callable[[], str] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self.repository = repository
        self.clock = clock
        self.id_factory = id_factory

    def create_appointment(self, request: AppointmentRequest) -> AppointmentRequest:
        """Persist a new appointment and echo the request back.

        The returned payload is the caller's request with the generated
        ``id`` and the ``created_at``/``updated_at`` stamps filled in; the
        stored item is not read back.
        """
        validate_status(request.status)
        now = self.clock()
        appointment = self._to_storage(request, self.id_factory(), created_at=now, updated_at=now)
        try:
            self.repository.save(appointment)
        except ServiceError as err:
            logger.error("Error on AppointmentRepository.save: %s", err)
            raise
        logger.info("Created appointment %s", appointment.id)
        return request.model_copy(update={"id": appointment.id, "created_at": now, "updated_at": now})

    def get_appointment(self, params: GetAppointmentRequest) -> AppointmentRequest:
        if params.id:
            logger.info("Getting appointment by ID %s", params.id)
            appointment = self.repository.get_by_id(params.id)
            if appointment is None:
                raise NotFoundError(f"appointment {params.id} not found")
            return self._to_wire(appointment)

        if params.patient_id:
            logger.info("Getting appointments by PatientID %s", params.patient_id)
            matches = self.repository.get_by_patient_id(params.patient_id)
            if not matches:
                raise NotFoundError(f"no appointments found for patientID: {params.patient_id}")
            return self._first(matches, "patientID", params.patient_id)

        if params.doctor_id:
            logger.info("Getting appointments by DoctorID %s", params.doctor_id)
            matches = self.repository.get_by_doctor_id(params.doctor_id)
            if not matches:
                raise NotFoundError(f"no appointments found for doctorID: {params.doctor_id}")
            return self._first(matches, "doctorID", params.doctor_id)

        logger.error("Invalid parameters for get_appointment")
        raise InvalidParametersError("invalid parameters: must provide ID, ClientID, PatientID, or DoctorID")

    def get_all_appointments(self, client_id: str) -> List[AppointmentRequest]:
        if not client_id:
            logger.error("Empty client-id provided to get_all_appointments")
            raise ValidationError("client-id cannot be empty")

        logger.info("Getting all appointments by ClientID %s", client_id)
        appointments = self.repository.get_by_client_id(client_id)
        results = [self._to_wire(a) for a in appointments]
        logger.info("Retrieved %d appointments", len(results))
        return results

    def update_appointment(self, request: AppointmentRequest) -> AppointmentRequest:
        """Overlay the request onto the stored appointment.

        Every mutable field is taken from the request; ``created_at`` is
        kept from the stored item and ``updated_at`` is re-stamped.
        """
        if not request.id:
            logger.error("Missing appointment ID for update")
            raise ValidationError("appointment ID is required for update")
        validate_status(request.status)

        logger.info("Updating appointment %s", request.id)
        existing = self._find_existing(request.id)
        updated = self._to_storage(
            request,
            existing.id,
            created_at=existing.created_at,
            updated_at=self.clock(),
        )
        try:
            self.repository.save(updated)
        except ServiceError as err:
            logger.error("Error updating appointment %s: %s", request.id, err)
            raise RepositoryError(f"failed to update appointment: {err}") from err

        logger.info("Appointment %s updated", request.id)
        return self._to_wire(updated)

    def delete_appointment(self, appointment_id: str) -> None:
        if not appointment_id:
            logger.error("Empty ID provided for appointment deletion")
            raise ValidationError("appointment ID cannot be empty")

        logger.info("Deleting appointment %s", appointment_id)
        self._find_existing(appointment_id)
        try:
            self.repository.delete(appointment_id)
        except ServiceError as err:
            logger.error("Error deleting appointment %s: %s", appointment_id, err)
            raise RepositoryError(f"failed to delete appointment: {err}") from err
        logger.info("Appointment %s deleted", appointment_id)

    def _find_existing(self, appointment_id: str) -> Appointment:
        try:
            existing = self.repository.get_by_id(appointment_id)
        except ServiceError as err:
            logger.error("Error fetching appointment %s: %s", appointment_id, err)
            raise RepositoryError(f"failed to find appointment with ID {appointment_id}: {err}") from err
        if existing is None:
            logger.error("Appointment %s does not exist", appointment_id)
            raise NotFoundError(f"failed to find appointment with ID {appointment_id}: no such item")
        return existing

    def _first(self, matches: List[Appointment], label: str, value: str) -> AppointmentRequest:
        if len(matches) > 1:
            logger.warning(
                "%d appointments found for %s %s; returning only the first", len(matches), label, value
            )
        return self._to_wire(matches[0])

    @staticmethod
    def _to_storage(
        request: AppointmentRequest,
        appointment_id: str,
        created_at: str,
        updated_at: str,
    ) -> Appointment:
        return Appointment(
            id=appointment_id,
            client_id=request.client_id,
            patient_id=request.patient_id,
            doctor_id=request.doctor_id,
            date=request.date,
            duration=request.duration,
            status=request.status,
            notes=request.notes,
            created_at=created_at,
            updated_at=updated_at,
            metadata=request.metadata,
        )

    @staticmethod
    def _to_wire(appointment: Appointment) -> AppointmentRequest:
        return AppointmentRequest(**appointment.model_dump())
