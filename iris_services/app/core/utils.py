"""Identifier and timestamp helpers shared by the services."""

import uuid
from datetime import datetime, timezone


def utc_now() -> str:
    """Current UTC time as an ISO 8601 string with offset."""
    return datetime.now(timezone.utc).isoformat()


def new_id() -> str:
    return str(uuid.uuid4())
