import json
from unittest.mock import MagicMock

import pytest

from iris_services.app.repositories import AppointmentRepository, PatientRepository
from iris_services.app.services.appointment_service import AppointmentService
from iris_services.app.services.patient_service import PatientService


CREATED_AT = "2025-01-01T09:00:00+00:00"
NOW = "2025-03-15T12:30:00.123456+00:00"


def fixed_clock():
    return NOW


def make_event(body=None, path=None, query=None):
    """Minimal API Gateway REST proxy event."""
    return {
        "httpMethod": "GET",
        "pathParameters": path,
        "queryStringParameters": query,
        "body": json.dumps(body) if isinstance(body, dict) else body,
    }


@pytest.fixture
def appointment_payload():
    return {
        "client_id": "client123",
        "patient_id": "patient123",
        "doctor_id": "doctor123",
        "date": "2025-04-01T10:00:00Z",
        "duration": 30,
        "status": "SCHEDULED",
        "notes": "Regular checkup",
        "metadata": {"room": "3B"},
    }


@pytest.fixture
def patient_payload():
    return {
        "client_id": "client123",
        "first_name": "John",
        "last_name": "Doe",
        "doc_type": "DNI",
        "doc_number": "12345678",
        "birth_date": "1990-01-01",
        "gender": "M",
        "country_code": "54",
        "phone_number": "1234567890",
        "email": "john.doe@example.com",
        "address_street": "Main St",
        "address_number": "123",
        "address_city": "City",
        "address_country": "Country",
        "zip_code": "12345",
        "metadata": {"key": "value"},
    }


@pytest.fixture
def appointment_table():
    table = MagicMock()
    table.get_item.return_value = {}
    table.query.return_value = {"Items": []}
    return table


@pytest.fixture
def patient_table():
    table = MagicMock()
    table.get_item.return_value = {}
    table.query.return_value = {"Items": []}
    return table


@pytest.fixture
def appointment_service(appointment_table):
    return AppointmentService(
        AppointmentRepository(appointment_table),
        clock=fixed_clock,
        id_factory=lambda: "appt-1",
    )


@pytest.fixture
def patient_service(patient_table):
    return PatientService(
        PatientRepository(patient_table),
        clock=fixed_clock,
        id_factory=lambda: "patient-1",
    )
