"""
Pydantic models for patients.

Fields described as "Required" are documented as such for API
consumers but are not enforced; an omitted field is stored as an empty
string.

A patient is also addressable by its identity document.  The storage
model carries ``doc_key``, the composite ``"<doc_type>#<doc_number>"``
value backing the ``doc_key_index`` secondary index.  It is recomputed
by the repository on every write.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


def document_key(doc_type: str, doc_number: str) -> str:
    """Build the composite document lookup key."""
    return f"{doc_type}#{doc_number}"


class PatientRequest(BaseModel):
    """Patient as sent and received by API callers."""

    id: Optional[str] = None
    client_id: str = Field("", description="Required.")
    first_name: str = Field("", description="Required.")
    last_name: str = Field("", description="Required.")
    doc_type: str = Field("", description="Required. Identity document type, e.g. DNI")
    doc_number: str = Field("", description="Required.")
    birth_date: str = Field("", description="Required.")
    gender: str = Field("", description="Required. Free text")
    country_code: str = Field("", description="Required.")
    phone_number: str = Field("", description="Required.")
    email: str = Field("", description="Required.")
    address_street: str = Field("", description="Required.")
    address_number: str = Field("", description="Required.")
    address_city: str = Field("", description="Required.")
    address_country: str = Field("", description="Required.")
    zip_code: str = Field("", description="Required.")
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Patient(BaseModel):
    """Patient item as stored in DynamoDB."""

    id: str
    client_id: str = ""
    first_name: str = ""
    last_name: str = ""
    doc_type: str = ""
    doc_number: str = ""
    doc_key: str = ""
    birth_date: str = ""
    gender: str = ""
    country_code: str = ""
    phone_number: str = ""
    email: str = ""
    address_street: str = ""
    address_number: str = ""
    address_city: str = ""
    address_country: str = ""
    zip_code: str = ""
    created_at: str = ""
    updated_at: str = ""
    metadata: Optional[Dict[str, Any]] = None


class GetPatientRequest(BaseModel):
    client_id: str = ""
    id: str = ""
    doc_type: str = ""
    doc_number: str = ""
