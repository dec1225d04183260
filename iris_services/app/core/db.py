"""
DynamoDB integration.

This module builds the boto3 DynamoDB resource from the application
settings and hands out ``Table`` objects for the repositories.  The
tables themselves (and their global secondary indexes) are provisioned
outside this code base; nothing here creates or migrates them.

It also holds the small conversion helpers needed at the store
boundary: DynamoDB rejects Python ``float`` values and returns every
number as ``Decimal``.
"""

import json
from decimal import Decimal
from typing import Any, Dict, Iterable

import boto3

from .config import settings


def get_resource():
    """Create and return a DynamoDB service resource.

    When ``settings.dynamodb_endpoint_url`` is set the resource talks
    to that endpoint instead (DynamoDB Local, LocalStack).
    """
    kwargs: Dict[str, Any] = {"region_name": settings.aws_region}
    if settings.dynamodb_endpoint_url:
        kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
    return boto3.resource("dynamodb", **kwargs)


def get_table(name: str, resource=None):
    """Return the ``Table`` object for ``name``."""
    resource = resource or get_resource()
    return resource.Table(name)


def to_item(data: Dict[str, Any], index_keys: Iterable[str] = ()) -> Dict[str, Any]:
    """Prepare a plain dict for ``put_item``.

    ``None`` attributes are dropped and floats (anywhere in the
    structure, e.g. inside ``metadata``) become ``Decimal``.  Attributes
    named in ``index_keys`` are also dropped when empty: DynamoDB
    rejects ``""`` as a secondary index key, while a missing attribute
    just keeps the item out of that index.
    """
    index_keys = set(index_keys)
    cleaned = {
        k: v for k, v in data.items() if v is not None and not (k in index_keys and v == "")
    }
    return json.loads(json.dumps(cleaned), parse_float=Decimal)


def from_item(item: Any) -> Any:
    """Convert ``Decimal`` values returned by DynamoDB to int or float."""
    if isinstance(item, dict):
        return {k: from_item(v) for k, v in item.items()}
    if isinstance(item, list):
        return [from_item(v) for v in item]
    if isinstance(item, Decimal):
        return int(item) if item == item.to_integral_value() else float(item)
    return item
