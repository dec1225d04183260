"""
Translate FastAPI requests into API Gateway proxy events.

The local server does not reimplement any operation.  Each route
builds the same event API Gateway would send, calls the Lambda
function in a worker thread (the functions block on boto3) and
returns its ``statusCode``/``headers``/``body`` verbatim.
"""

import base64
from typing import Any, Callable, Dict, Optional, Tuple

from fastapi import Request, Response
from starlette.concurrency import run_in_threadpool


def _encode_body(raw: bytes) -> Tuple[Optional[str], bool]:
    """Return ``(body, isBase64Encoded)``; non UTF-8 payloads go base64."""
    if not raw:
        return None, False
    try:
        return raw.decode("utf-8"), False
    except UnicodeDecodeError:
        return base64.b64encode(raw).decode("ascii"), True


async def build_event(request: Request, path_parameters: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    body, is_base64 = _encode_body(await request.body())
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "headers": dict(request.headers),
        "pathParameters": path_parameters or None,
        "queryStringParameters": dict(request.query_params) or None,
        "body": body,
        "isBase64Encoded": is_base64,
    }


async def invoke(
    function: Callable[[Dict[str, Any], Any], Dict[str, Any]],
    request: Request,
    path_parameters: Optional[Dict[str, str]] = None,
) -> Response:
    """Run ``function`` against ``request`` and convert its result."""
    event = await build_event(request, path_parameters)
    result = await run_in_threadpool(function, event, None)
    status_code = result["statusCode"]
    # 204 responses must not carry a body.
    content = None if status_code == 204 else result.get("body") or None
    return Response(content=content, status_code=status_code, headers=result.get("headers") or {})
