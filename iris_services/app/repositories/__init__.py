"""
Repository layer.

One class per DynamoDB table.  Repositories translate between storage
models and items and wrap store failures in ``RepositoryError``; they
hold no business rules.
"""

from .appointment_repository import AppointmentRepository
from .patient_repository import PatientRepository

__all__ = ["AppointmentRepository", "PatientRepository"]
