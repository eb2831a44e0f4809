"""
Single entrypoint Lambda for the HTTP API.

The health probe gets its own route; every other request is handed to the
dispatcher, which enforces POST itself.
"""

from typing import Callable, Tuple

from . import dispatcher, health_check


def _route_key(event) -> str:
    http = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http.get("method", "")
    path = event.get("rawPath") or event.get("path") or http.get("path", "")
    return f"{method.upper()} {path}"


def lambda_handler(event, context):
    """Entry point invoked by API Gateway HTTP API."""
    route_key = _route_key(event)

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
    )

    for prefix, handler in route_table:
        if route_key.startswith(prefix):
            return handler(event, context)

    return dispatcher.lambda_handler(event, context)
