"""
DynamoDB access for appointments.

Every method issues exactly one call against the table: ``put_item``,
``get_item``, ``delete_item`` or a ``query`` on one of the global
secondary indexes.  Queries return a single page; ``LastEvaluatedKey``
is not followed.
"""

import logging
from typing import List, Optional

import pydantic
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from iris_services.app.core.db import from_item, to_item
from iris_services.app.core.exceptions import RepositoryError
from iris_services.app.schemas.appointment import Appointment


logger = logging.getLogger(__name__)

# Secondary index key attributes; left off the item when empty.
INDEX_KEYS = ("client_id", "patient_id", "doctor_id")


class AppointmentRepository:
    """Appointments table plus its client, patient and doctor indexes."""

    def __init__(
        self,
        table,
        client_id_index: str = "client_id_index",
        patient_id_index: str = "patient_id_index",
        doctor_id_index: str = "doctor_id_index",
    ) -> None:
        self.table = table
        self.client_id_index = client_id_index
        self.patient_id_index = patient_id_index
        self.doctor_id_index = doctor_id_index

    def save(self, appointment: Appointment) -> None:
        """Write the whole item, replacing any existing one with the same id."""
        try:
            self.table.put_item(Item=to_item(appointment.model_dump(), INDEX_KEYS))
        except (BotoCoreError, ClientError) as err:
            logger.error("Error saving appointment %s: %s", appointment.id, err)
            raise RepositoryError(f"could not save appointment {appointment.id}: {err}") from err

    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Return the appointment or ``None`` if no item has this id."""
        try:
            resp = self.table.get_item(Key={"id": appointment_id})
        except (BotoCoreError, ClientError) as err:
            logger.error("Error reading appointment %s: %s", appointment_id, err)
            raise RepositoryError(f"could not read appointment {appointment_id}: {err}") from err
        item = resp.get("Item")
        if not item:
            return None
        return self._to_model(item)

    def get_by_client_id(self, client_id: str) -> List[Appointment]:
        return self._query(self.client_id_index, "client_id", client_id)

    def get_by_patient_id(self, patient_id: str) -> List[Appointment]:
        return self._query(self.patient_id_index, "patient_id", patient_id)

    def get_by_doctor_id(self, doctor_id: str) -> List[Appointment]:
        return self._query(self.doctor_id_index, "doctor_id", doctor_id)

    def delete(self, appointment_id: str) -> None:
        try:
            self.table.delete_item(Key={"id": appointment_id})
        except (BotoCoreError, ClientError) as err:
            logger.error("Error deleting appointment %s: %s", appointment_id, err)
            raise RepositoryError(f"could not delete appointment {appointment_id}: {err}") from err

    def _query(self, index_name: str, attribute: str, value: str) -> List[Appointment]:
        try:
            resp = self.table.query(
                IndexName=index_name,
                KeyConditionExpression=Key(attribute).eq(value),
            )
        except (BotoCoreError, ClientError) as err:
            logger.error("Error querying %s for %s=%s: %s", index_name, attribute, value, err)
            raise RepositoryError(f"could not query {index_name}: {err}") from err
        return [self._to_model(item) for item in resp.get("Items", [])]

    @staticmethod
    def _to_model(item) -> Appointment:
        try:
            return Appointment(**from_item(item))
        except pydantic.ValidationError as err:
            logger.error("Stored appointment %s does not fit the model: %s", item.get("id"), err)
            raise RepositoryError(f"could not decode appointment {item.get('id')}: {err}") from err
