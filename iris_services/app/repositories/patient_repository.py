"""
DynamoDB access for patients.

Besides the primary key the patients table has two global secondary
indexes: ``client_id_index`` for listing a client's patients and
``doc_key_index`` for lookups by identity document.  ``doc_key`` is
derived here, on every write, so the index can never drift from
``doc_type``/``doc_number``.
"""

import logging
from typing import List, Optional

import pydantic
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from iris_services.app.core.db import from_item, to_item
from iris_services.app.core.exceptions import RepositoryError
from iris_services.app.schemas.patient import Patient, document_key


logger = logging.getLogger(__name__)

# Secondary index key attributes; left off the item when empty.
INDEX_KEYS = ("client_id", "doc_key")


class PatientRepository:
    """Patients table plus its client and document indexes."""

    def __init__(self, table, client_id_index: str = "client_id_index", doc_key_index: str = "doc_key_index") -> None:
        self.table = table
        self.client_id_index = client_id_index
        self.doc_key_index = doc_key_index

    def save(self, patient: Patient) -> None:
        """Write the whole item.  Sets ``patient.doc_key`` as a side effect."""
        patient.doc_key = document_key(patient.doc_type, patient.doc_number)
        try:
            self.table.put_item(Item=to_item(patient.model_dump(), INDEX_KEYS))
        except (BotoCoreError, ClientError) as err:
            logger.error("Error saving patient %s: %s", patient.id, err)
            raise RepositoryError(f"could not save patient {patient.id}: {err}") from err

    def get_by_id(self, patient_id: str) -> Optional[Patient]:
        try:
            resp = self.table.get_item(Key={"id": patient_id})
        except (BotoCoreError, ClientError) as err:
            logger.error("Error reading patient %s: %s", patient_id, err)
            raise RepositoryError(f"could not read patient {patient_id}: {err}") from err
        item = resp.get("Item")
        if not item:
            return None
        return self._to_model(item)

    def get_by_client_id(self, client_id: str) -> List[Patient]:
        return self._query(self.client_id_index, "client_id", client_id)

    def get_by_document(self, doc_type: str, doc_number: str) -> Optional[Patient]:
        """Return the first patient holding this document, or ``None``."""
        patients = self._query(self.doc_key_index, "doc_key", document_key(doc_type, doc_number))
        if not patients:
            return None
        if len(patients) > 1:
            logger.warning(
                "%d patients share document %s %s; returning the first", len(patients), doc_type, doc_number
            )
        return patients[0]

    def delete(self, patient_id: str) -> None:
        try:
            self.table.delete_item(Key={"id": patient_id})
        except (BotoCoreError, ClientError) as err:
            logger.error("Error deleting patient %s: %s", patient_id, err)
            raise RepositoryError(f"could not delete patient {patient_id}: {err}") from err

    def _query(self, index_name: str, attribute: str, value: str) -> List[Patient]:
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
    def _to_model(item) -> Patient:
        try:
            return Patient(**from_item(item))
        except pydantic.ValidationError as err:
            logger.error("Stored patient %s does not fit the model: %s", item.get("id"), err)
            raise RepositoryError(f"could not decode patient {item.get('id')}: {err}") from err
