"""
Action dispatch service.

Turns an (action, payload) pair into exactly one upstream call. The handler
stays thin; selection, validation and the call live here.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ValidationError

from models.actions import PAYLOAD_MODELS, Action
from services.gemini_client import GeminiClient
from services.prompt_templates import TEMPLATES
from utils.error_handling import InvalidActionError, PayloadValidationError
from utils.logging_config import get_logger

logger = get_logger(__name__)


def resolve_action(raw_action: Any) -> Action:
    """Map the client's action string onto the Action enum."""
    try:
        return Action(raw_action)
    except (ValueError, TypeError):
        raise InvalidActionError(raw_action) from None


def parse_payload(action: Action, raw_payload: Any) -> BaseModel:
    """Validate the payload against the model registered for the action."""
    model = PAYLOAD_MODELS[action]
    try:
        return model.model_validate(raw_payload if raw_payload is not None else {})
    except ValidationError as exc:
        fields = sorted(
            {".".join(str(p) for p in err["loc"]) or "payload" for err in exc.errors()}
        )
        raise PayloadValidationError(
            f"Payload inválido para '{action.value}': {', '.join(fields)}"
        ) from exc


def build_request_body(action: Action, raw_payload: Any) -> Dict[str, Any]:
    """Render the upstream request body for an action."""
    payload = parse_payload(action, raw_payload)
    return TEMPLATES[action](payload)


class DispatchService:
    """Select the template for an action and forward it upstream."""

    def __init__(
        self, client_factory: Optional[Callable[[], GeminiClient]] = None
    ) -> None:
        # Resolved per call so a missing key fails the request, not the cold start.
        self.client_factory = client_factory or GeminiClient.from_environment

    def dispatch(
        self, raw_action: Any, raw_payload: Any, correlation_id: str = ""
    ) -> Dict[str, Any]:
        """Validate, render and send; returns the upstream JSON unchanged."""
        client = self.client_factory()
        action = resolve_action(raw_action)
        body = build_request_body(action, raw_payload)

        logger.info(
            "Dispatching action",
            extra={"correlation_id": correlation_id, "action": action.value},
        )
        start = time.perf_counter()
        result = client.generate_content(body)
        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "Action complete",
            extra={
                "correlation_id": correlation_id,
                "action": action.value,
                "duration_ms": duration_ms,
            },
        )
        return result
