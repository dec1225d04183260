from decimal import Decimal
from unittest.mock import patch

from iris_services.app import main
from iris_services.app.core import db
from iris_services.app.core.config import Settings
from iris_services.app.functions import dependencies


def test_settings_defaults():
    settings = Settings()

    assert settings.appointments_table
    assert settings.client_id_index == "client_id_index"
    assert settings.doc_key_index == "doc_key_index"


def test_to_item_drops_none_and_converts_nested_floats():
    item = db.to_item({"id": "a", "notes": None, "duration": 30, "metadata": {"bmi": 22.4, "list": [1.5]}})

    assert item == {"id": "a", "duration": 30, "metadata": {"bmi": Decimal("22.4"), "list": [Decimal("1.5")]}}


def test_from_item_restores_numbers():
    assert db.from_item({"a": Decimal("3"), "b": [Decimal("0.25")], "c": "x"}) == {"a": 3, "b": [0.25], "c": "x"}


def test_get_resource_uses_endpoint_override(monkeypatch):
    monkeypatch.setattr(db.settings, "dynamodb_endpoint_url", "http://localhost:8000")
    monkeypatch.setattr(db.settings, "aws_region", "eu-west-1")

    with patch.object(db.boto3, "resource") as resource:
        db.get_resource()

    resource.assert_called_once_with("dynamodb", region_name="eu-west-1", endpoint_url="http://localhost:8000")


def test_dependencies_wire_configured_tables(monkeypatch):
    monkeypatch.setattr(dependencies.settings, "appointments_table", "Appts")
    monkeypatch.setattr(dependencies.settings, "doctor_id_index", "by_doctor")
    dependencies.appointment_service.cache_clear()

    with patch.object(dependencies, "get_table") as get_table:
        service = dependencies.appointment_service()

    get_table.assert_called_once_with("Appts")
    assert service.repository.table is get_table.return_value
    assert service.repository.doctor_id_index == "by_doctor"
    assert dependencies.appointment_service() is service
    dependencies.appointment_service.cache_clear()


def test_to_item_drops_empty_index_keys_only():
    item = db.to_item({"id": "a", "client_id": "", "notes": "", "doctor_id": "d1"}, index_keys=("client_id", "doctor_id"))

    assert item == {"id": "a", "notes": "", "doctor_id": "d1"}


def test_create_app_passes_log_file(monkeypatch):
    monkeypatch.setattr(main.settings, "log_file", "/tmp/iris.log")

    with patch.object(main, "setup_logging") as setup_logging:
        main.create_app()

    setup_logging.assert_called_once_with(main.settings.log_level, logfile="/tmp/iris.log")


def test_create_app_without_log_file(monkeypatch):
    monkeypatch.setattr(main.settings, "log_file", "")

    with patch.object(main, "setup_logging") as setup_logging:
        main.create_app()

    setup_logging.assert_called_once_with(main.settings.log_level, logfile=None)
