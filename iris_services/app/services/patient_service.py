"""
Business logic for patients.

Lookup priority for :meth:`PatientService.get_patient` is ``id``, then
the ``doc_type``/``doc_number`` pair (both must be present).  The
composite ``doc_key`` is not handled here; the repository derives it
on every write.
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
from iris_services.app.repositories.patient_repository import PatientRepository
from iris_services.app.schemas.patient import GetPatientRequest, Patient, PatientRequest


logger = logging.getLogger(__name__)


class PatientService:
    """Service for creating, reading, updating and deleting patients."""

    def __init__(
        self,
        repository: PatientRepository,
        clock: Callable[[], str] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self.repository = repository
        self.clock = clock
        self.id_factory = id_factory

    def create_patient(self, request: PatientRequest) -> PatientRequest:
        """Persist a new patient and echo the request back with its id and stamps."""
        now = self.clock()
        patient = self._to_storage(request, self.id_factory(), created_at=now, updated_at=now)
        try:
            self.repository.save(patient)
        except ServiceError as err:
            logger.error("Error on PatientRepository.save: %s", err)
            raise
        logger.info("Created patient %s", patient.id)
        return request.model_copy(update={"id": patient.id, "created_at": now, "updated_at": now})

    def get_patient(self, params: GetPatientRequest) -> PatientRequest:
        if params.id:
            logger.info("Getting patient by ID %s", params.id)
            patient = self.repository.get_by_id(params.id)
            if patient is None:
                raise NotFoundError(f"patient {params.id} not found")
            return self._to_wire(patient)

        if params.doc_type and params.doc_number:
            logger.info("Getting patient by document %s %s", params.doc_type, params.doc_number)
            patient = self.repository.get_by_document(params.doc_type, params.doc_number)
            if patient is None:
                raise NotFoundError(f"no patient found for document: {params.doc_type} {params.doc_number}")
            return self._to_wire(patient)

        logger.error("Invalid parameters for get_patient")
        raise InvalidParametersError("invalid parameters: must provide ID, ClientID, or DocType/DocNumber")

    def get_all_patients(self, client_id: str) -> List[PatientRequest]:
        if not client_id:
            logger.error("Empty client-id provided to get_all_patients")
            raise ValidationError("client-id cannot be empty")

        logger.info("Getting all patients by ClientID %s", client_id)
        patients = self.repository.get_by_client_id(client_id)
        results = [self._to_wire(p) for p in patients]
        logger.info("Retrieved %d patients", len(results))
        return results

    def update_patient(self, request: PatientRequest) -> PatientRequest:
        if not request.id:
            logger.error("Missing patient ID for update")
            raise ValidationError("patient ID is required for update")

        logger.info("Updating patient %s", request.id)
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
            logger.error("Error updating patient %s: %s", request.id, err)
            raise RepositoryError(f"failed to update patient: {err}") from err

        logger.info("Patient %s updated", request.id)
        return self._to_wire(updated)

    def delete_patient(self, patient_id: str) -> None:
        if not patient_id:
            logger.error("Empty ID provided for patient deletion")
            raise ValidationError("patient ID cannot be empty")

        logger.info("Deleting patient %s", patient_id)
        self._find_existing(patient_id)
        try:
            self.repository.delete(patient_id)
        except ServiceError as err:
            logger.error("Error deleting patient %s: %s", patient_id, err)
            raise RepositoryError(f"failed to delete patient: {err}") from err
        logger.info("Patient %s deleted", patient_id)

    def _find_existing(self, patient_id: str) -> Patient:
        try:
            existing = self.repository.get_by_id(patient_id)
        except ServiceError as err:
            logger.error("Error fetching patient %s: %s", patient_id, err)
            raise RepositoryError(f"failed to find patient with ID {patient_id}: {err}") from err
        if existing is None:
            logger.error("Patient %s does not exist", patient_id)
            raise NotFoundError(f"failed to find patient with ID {patient_id}: no such item")
        return existing

    @staticmethod
    def _to_storage(request: PatientRequest, patient_id: str, created_at: str, updated_at: str) -> Patient:
        fields = request.model_dump(exclude={"id", "created_at", "updated_at"})
        return Patient(id=patient_id, created_at=created_at, updated_at=updated_at, **fields)

    @staticmethod
    def _to_wire(patient: Patient) -> PatientRequest:
        return PatientRequest(**patient.model_dump(exclude={"doc_key"}))
