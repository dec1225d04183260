"""
API Gateway proxy event helpers.

Every Lambda function in this package receives a REST API proxy event
(``pathParameters``, ``queryStringParameters``, ``body``, ...) and must
return a dict with ``statusCode``, ``headers`` and ``body``.  This
module holds the parsing and marshalling shared by all of them, plus
the :func:`gateway_function` decorator that turns exceptions into
responses:

* ``ValidationError`` (and subclasses) → 400 with the error's message
* any other ``ServiceError`` → 500 with the operation's fixed message

Unexpected exceptions are not caught; the Lambda runtime reports them.
"""

import base64
import binascii
import functools
import json
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel

from iris_services.app.core.exceptions import ServiceError, ValidationError


logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

ModelT = TypeVar("ModelT", bound=BaseModel)


def _encode(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_none=True)
    if isinstance(payload, list):
        return [_encode(item) for item in payload]
    return payload


def json_response(status_code: int, payload: Any = None) -> Dict[str, Any]:
    """Build a proxy response.  ``payload=None`` produces an empty body."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(_encode(payload)) if payload is not None else "",
    }


def error_response(status_code: int, message: str) -> Dict[str, Any]:
    return json_response(status_code, {"error": message})


def path_param(event: Dict[str, Any], name: str) -> str:
    return (event.get("pathParameters") or {}).get(name) or ""


def query_param(event: Dict[str, Any], name: str) -> str:
    return (event.get("queryStringParameters") or {}).get(name) or ""


def parse_body(event: Dict[str, Any], model: Type[ModelT]) -> ModelT:
    """Decode the JSON body into ``model``.

    Raises ``ValidationError("invalid request body")`` when the body is
    missing, is not valid base64 or UTF-8, is not JSON, or does not fit
    the model's field types.
    """
    body = event.get("body")
    try:
        if body and event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True).decode("utf-8")
        return model.model_validate_json(body or "")
    except (binascii.Error, UnicodeDecodeError, pydantic.ValidationError) as err:
        logger.error("Error unmarshalling request: %s", err)
        raise ValidationError("invalid request body") from err


def _request_id(context: Any) -> Optional[str]:
    return getattr(context, "aws_request_id", None)


def gateway_function(failure_message: str) -> Callable:
    """Decorate a Lambda handler with the shared error mapping.

    ``failure_message`` is the client-facing text for 500 responses,
    e.g. ``"could not create appointment"``.
    """

    def decorator(func: Callable[[Dict[str, Any], Any], Dict[str, Any]]):
        @functools.wraps(func)
        def wrapper(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
            event = event or {}
            request_id = _request_id(context)
            try:
                return func(event, context)
            except ValidationError as err:
                logger.error("[%s] %s rejected: %s", request_id, func.__qualname__, err)
                return error_response(400, str(err))
            except ServiceError as err:
                logger.error("[%s] %s failed: %s", request_id, func.__qualname__, err)
                return error_response(500, failure_message)

        return wrapper

    return decorator
