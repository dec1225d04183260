import base64
import json
import logging
from decimal import Decimal
from types import SimpleNamespace

import pytest
from botocore.exceptions import ClientError

from conftest import CREATED_AT, NOW, make_event
from iris_services.app.functions import appointments, patients


@pytest.fixture(autouse=True)
def wire_services(monkeypatch, appointment_service, patient_service):
    monkeypatch.setattr(appointments, "appointment_service", lambda: appointment_service)
    monkeypatch.setattr(patients, "patient_service", lambda: patient_service)


def body(response):
    return json.loads(response["body"])


# appointments


def test_create_appointment_returns_201_with_echo(appointment_table, appointment_payload):
    response = appointments.create(make_event(body=appointment_payload))

    assert response["statusCode"] == 201
    assert response["headers"]["Content-Type"] == "application/json"
    payload = body(response)
    assert payload["status"] == "SCHEDULED"
    assert payload["notes"] == "Regular checkup"
    assert payload["id"] == "appt-1"
    assert payload["created_at"] == NOW
    appointment_table.put_item.assert_called_once()


def test_create_appointment_bogus_status_is_400_without_store_call(appointment_table, appointment_payload):
    appointment_payload["status"] = "BOGUS"

    response = appointments.create(make_event(body=appointment_payload))

    assert response["statusCode"] == 400
    assert body(response)["error"].startswith("invalid status value: BOGUS. Must be one of:")
    appointment_table.put_item.assert_not_called()


@pytest.mark.parametrize("raw", [None, "", "{not json", '{"duration": "thirty"}'])
def test_create_appointment_invalid_body(raw):
    response = appointments.create(make_event(body=raw))

    assert response["statusCode"] == 400
    assert body(response) == {"error": "invalid request body"}


def test_create_appointment_base64_body(appointment_payload):
    encoded = base64.b64encode(json.dumps(appointment_payload).encode()).decode()
    event = make_event(body=encoded)
    event["isBase64Encoded"] = True

    response = appointments.create(event)

    assert response["statusCode"] == 201


@pytest.mark.parametrize("raw", ["!!!not-base64", base64.b64encode(b"\xff\xfe{").decode()])
def test_create_appointment_undecodable_base64_body(appointment_table, raw):
    event = make_event(body=raw)
    event["isBase64Encoded"] = True

    response = appointments.create(event)

    assert response["statusCode"] == 400
    assert body(response) == {"error": "invalid request body"}
    appointment_table.put_item.assert_not_called()


def test_create_appointment_store_failure_is_500(appointment_table, appointment_payload):
    appointment_table.put_item.side_effect = ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}}, "PutItem"
    )

    response = appointments.create(make_event(body=appointment_payload))

    assert response["statusCode"] == 500
    assert body(response) == {"error": "could not create appointment"}


def test_get_appointment_by_path_id(appointment_table):
    appointment_table.get_item.return_value = {
        "Item": {"id": "appt-7", "status": "COMPLETED", "duration": Decimal("15"), "created_at": CREATED_AT}
    }

    response = appointments.get(make_event(path={"id": "appt-7"}))

    assert response["statusCode"] == 200
    assert body(response)["duration"] == 15
    appointment_table.get_item.assert_called_once_with(Key={"id": "appt-7"})


def test_get_appointment_by_query_id(appointment_table):
    appointment_table.get_item.return_value = {"Item": {"id": "a1", "status": "SCHEDULED"}}

    response = appointments.get(make_event(query={"id": "a1"}))

    assert response["statusCode"] == 200
    assert body(response)["id"] == "a1"
    appointment_table.get_item.assert_called_once_with(Key={"id": "a1"})


def test_get_appointment_with_unreadable_stored_item_is_500(appointment_table, caplog):
    appointment_table.get_item.return_value = {"Item": {"id": "a1", "duration": "thirty"}}

    with caplog.at_level(logging.ERROR):
        response = appointments.get(make_event(path={"id": "a1"}))

    assert response["statusCode"] == 500
    assert body(response) == {"error": "could not retrieve appointment"}
    assert "could not decode appointment a1" in caplog.text


def test_get_appointment_by_patient_query(appointment_table):
    appointment_table.query.return_value = {"Items": [{"id": "appt-3", "patient_id": "p1"}]}

    response = appointments.get(make_event(query={"patientId": "p1"}))

    assert response["statusCode"] == 200
    assert body(response)["id"] == "appt-3"
    assert appointment_table.query.call_args.kwargs["IndexName"] == "patient_id_index"


def test_get_appointment_without_parameters_is_400(appointment_table):
    response = appointments.get(make_event())

    assert response["statusCode"] == 400
    assert body(response) == {"error": "at least one search parameter is required"}
    appointment_table.get_item.assert_not_called()


def test_get_appointment_client_only_is_invalid_parameters(appointment_table):
    response = appointments.get(make_event(query={"clientId": "client123"}))

    assert response["statusCode"] == 400
    assert body(response)["error"].startswith("invalid parameters")
    appointment_table.query.assert_not_called()


def test_get_appointment_not_found_is_500():
    response = appointments.get(make_event(path={"id": "ghost"}))

    assert response["statusCode"] == 500
    assert body(response) == {"error": "could not retrieve appointment"}


def test_get_all_appointments(appointment_table):
    appointment_table.query.return_value = {"Items": [{"id": "a1"}, {"id": "a2"}]}

    response = appointments.get_all(make_event(query={"clientId": "client123"}))

    assert response["statusCode"] == 200
    assert [a["id"] for a in body(response)] == ["a1", "a2"]


def test_get_all_appointments_empty_list():
    response = appointments.get_all(make_event(query={"clientId": "client123"}))

    assert response["statusCode"] == 200
    assert body(response) == []


def test_get_all_appointments_without_client_id_is_400(appointment_table):
    response = appointments.get_all(make_event(query={"patientId": "p1"}))

    assert response["statusCode"] == 400
    assert body(response) == {"error": "missing clientId parameter"}
    appointment_table.query.assert_not_called()


def test_update_appointment(appointment_table, appointment_payload):
    appointment_table.get_item.return_value = {
        "Item": {"id": "appt-1", "status": "SCHEDULED", "created_at": CREATED_AT, "updated_at": CREATED_AT}
    }
    appointment_payload.update(id="appt-1", status="IN_PROGRESS")

    response = appointments.update(make_event(body=appointment_payload))

    assert response["statusCode"] == 200
    payload = body(response)
    assert payload["created_at"] == CREATED_AT
    assert payload["updated_at"] == NOW
    assert payload["status"] == "IN_PROGRESS"


def test_update_appointment_empty_id_is_400(appointment_table, appointment_payload):
    response = appointments.update(make_event(body=appointment_payload))

    assert response["statusCode"] == 400
    assert body(response) == {"error": "missing appointment ID"}
    appointment_table.get_item.assert_not_called()


def test_update_appointment_missing_record_is_500(appointment_payload):
    appointment_payload["id"] = "ghost"

    response = appointments.update(make_event(body=appointment_payload))

    assert response["statusCode"] == 500
    assert body(response) == {"error": "could not update appointment"}


def test_delete_appointment(appointment_table):
    appointment_table.get_item.return_value = {"Item": {"id": "appt-1"}}

    response = appointments.delete(make_event(path={"id": "appt-1"}))

    assert response["statusCode"] == 204
    assert response["body"] == ""
    appointment_table.delete_item.assert_called_once_with(Key={"id": "appt-1"})


def test_delete_missing_appointment_is_500_and_logged(appointment_table, caplog):
    with caplog.at_level(logging.ERROR):
        response = appointments.delete(make_event(path={"id": "ghost"}), SimpleNamespace(aws_request_id="req-42"))

    assert response["statusCode"] == 500
    assert body(response) == {"error": "could not delete appointment"}
    assert "failed to find appointment with ID ghost" in caplog.text
    assert "req-42" in caplog.text
    appointment_table.delete_item.assert_not_called()


def test_delete_appointment_without_id_is_400():
    response = appointments.delete(make_event())

    assert response["statusCode"] == 400
    assert body(response) == {"error": "missing appointment ID"}


# patients


def test_create_patient(patient_table, patient_payload):
    response = patients.create(make_event(body=patient_payload))

    assert response["statusCode"] == 201
    assert body(response)["doc_number"] == "12345678"
    assert patient_table.put_item.call_args.kwargs["Item"]["doc_key"] == "DNI#12345678"


def test_get_patient_by_document(patient_table):
    patient_table.query.return_value = {"Items": [{"id": "p1", "doc_type": "DNI", "doc_number": "1", "doc_key": "DNI#1"}]}

    response = patients.get(make_event(query={"docType": "DNI", "docNumber": "1"}))

    assert response["statusCode"] == 200
    assert body(response)["id"] == "p1"
    assert "doc_key" not in body(response)


@pytest.mark.parametrize("query", [None, {"docType": "DNI"}, {"docNumber": "1"}, {"clientId": "c1"}])
def test_get_patient_missing_parameters(patient_table, query):
    response = patients.get(make_event(query=query))

    assert response["statusCode"] == 400
    assert body(response) == {"error": "missing required parameters"}
    patient_table.get_item.assert_not_called()
    patient_table.query.assert_not_called()


def test_get_all_patients_without_client_id_is_400(patient_table):
    response = patients.get_all(make_event())

    assert response["statusCode"] == 400
    patient_table.query.assert_not_called()


def test_update_patient_without_id_is_400(patient_payload):
    response = patients.update(make_event(body=patient_payload))

    assert response["statusCode"] == 400
    assert body(response) == {"error": "patient ID is required for update"}


def test_delete_patient_by_query_id(patient_table):
    patient_table.get_item.return_value = {"Item": {"id": "p1"}}

    response = patients.delete(make_event(query={"id": "p1"}))

    assert response["statusCode"] == 204
    patient_table.delete_item.assert_called_once_with(Key={"id": "p1"})


def test_delete_patient_without_id_is_400():
    response = patients.delete(make_event())

    assert response["statusCode"] == 400
    assert body(response) == {"error": "patient ID is required for deletion"}
