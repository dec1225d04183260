"""
Pydantic models for appointments.

``AppointmentRequest`` is the wire shape exchanged with callers,
``Appointment`` is the item persisted in the appointments table and
``GetAppointmentRequest`` carries the optional lookup parameters.

``status`` is kept as a plain string on the wire model so that an
unknown value reaches :func:`validate_status` and is reported with the
list of allowed values instead of a generic parse failure.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from iris_services.app.core.exceptions import ValidationError


class AppointmentStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


ALLOWED_STATUSES = tuple(s.value for s in AppointmentStatus)


def validate_status(status: str) -> None:
    """Raise ``ValidationError`` unless ``status`` is a known value."""
    if status not in ALLOWED_STATUSES:
        raise ValidationError(
            f"invalid status value: {status}. Must be one of: {', '.join(ALLOWED_STATUSES)}"
        )


class AppointmentRequest(BaseModel):
    """Appointment as sent and received by API callers."""

    id: Optional[str] = None
    client_id: str = ""
    patient_id: str = ""
    doctor_id: str = ""
    date: str = Field("", description="Start time, RFC 3339")
    duration: int = Field(0, description="Duration in minutes")
    status: str = ""
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class Appointment(BaseModel):
    """Appointment item as stored in DynamoDB."""

    id: str
    client_id: str = ""
    patient_id: str = ""
    doctor_id: str = ""
    date: str = ""
    duration: int = 0
    status: str = ""
    notes: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    metadata: Optional[Dict[str, Any]] = None


class GetAppointmentRequest(BaseModel):
    id: str = ""
    client_id: str = ""
    patient_id: str = ""
    doctor_id: str = ""
