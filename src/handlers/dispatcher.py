"""
Request dispatcher for POST /api.

Accepts {"action", "payload"}, renders the matching prompt, forwards it to
Gemini and relays the upstream JSON. Every failure after the method check
goes through one boundary that logs and returns {"error": message}.
"""

from __future__ import annotations

import base64
import json
import uuid
from typing import Any, Dict

from services.dispatch_service import DispatchService
from utils.error_handling import (
    AppError,
    InvalidActionError,
    error_response,
    to_response,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)
service = DispatchService()


def _method(event: Dict[str, Any]) -> str:
    """HTTP method for Netlify/REST (httpMethod) and HTTP API v2 events."""
    http = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http.get("method", "")
    return (method or "").upper()


def _parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Decode and parse the JSON request body."""
    raw = event.get("body")
    if raw is None:
        raise ValueError("Corpo da requisição vazio.")
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    body = json.loads(raw)
    if not isinstance(body, dict):
        raise ValueError("O corpo da requisição deve ser um objeto JSON.")
    return body


def lambda_handler(event, context) -> Dict:
    """Entry point for the dispatcher route."""
    if _method(event) != "POST":
        return {
            "statusCode": 405,
            "headers": {"Content-Type": "text/plain"},
            "body": "Method Not Allowed",
        }

    correlation_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    try:
        request = _parse_body(event)
        result = service.dispatch(
            request.get("action"),
            request.get("payload"),
            correlation_id=correlation_id,
        )
        return {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(result),
        }
    except AppError as exc:
        details = {
            "correlation_id": correlation_id,
            "error_type": type(exc).__name__,
            "error": str(exc),
        }
        if isinstance(exc, InvalidActionError):
            details["requested_action"] = repr(exc.action)
        logger.error("Dispatch failed", extra=details)
        return to_response(exc)
    except Exception as exc:
        logger.exception(
            "Unexpected dispatcher error", extra={"correlation_id": correlation_id}
        )
        return error_response(str(exc))
