"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, the same way the Lambda runtime hands them to
each function.  Defaults are provided for all fields and match the
table and index names used by the deployed stack.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Iris Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional log file for the local server.  Lambda logs to stdout only.
    log_file: str = os.getenv("LOG_FILE", "")

    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    # Point at DynamoDB Local (e.g. http://localhost:8000) when running
    # the development server.  Empty means the regional AWS endpoint.
    dynamodb_endpoint_url: str = os.getenv("DYNAMODB_ENDPOINT_URL", "")

    appointments_table: str = os.getenv("APPOINTMENTS_TABLE", "AppointmentsTable")
    patients_table: str = os.getenv("PATIENTS_TABLE", "PatientsTable")

    # Global secondary indexes.  ``client_id_index`` exists on both tables.
    client_id_index: str = os.getenv("CLIENT_ID_INDEX", "client_id_index")
    patient_id_index: str = os.getenv("PATIENT_ID_INDEX", "patient_id_index")
    doctor_id_index: str = os.getenv("DOCTOR_ID_INDEX", "doctor_id_index")
    doc_key_index: str = os.getenv("DOC_KEY_INDEX", "doc_key_index")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
