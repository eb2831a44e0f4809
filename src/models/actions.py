"""Actions the client can request and the payload each one carries."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Type

from pydantic import BaseModel, field_validator


class Action(str, Enum):
    """Operations exposed by the dispatcher, one prompt template each."""

    GENERATE_BUILD = "generateBuild"
    ANALYZE_FPS = "analyzeFps"
    OPTIMIZE_BUILD = "optimizeBuild"
    EXPLAIN_COMPONENT = "explainComponent"


class ActionPayload(BaseModel):
    """Base for payloads; every text field must carry something besides whitespace."""

    @field_validator("*")
    @classmethod
    def validate_not_blank(cls, value: Any) -> Any:
        """Reject blank text but pass it on exactly as the client sent it."""
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be blank")
        return value


class GenerateBuildPayload(ActionPayload):
    """Free-text description of the PC the user wants."""

    prompt: str


class AnalyzeFpsPayload(ActionPayload):
    """A previously generated build to estimate frame rates for."""

    # Kept as raw JSON so the prompt quotes exactly what the client sent.
    build: List[Any]


class OptimizeBuildPayload(ActionPayload):
    """A build plus the original request it was generated from."""

    build: List[Any]
    prompt: str


class ExplainComponentPayload(ActionPayload):
    """Component category and model name to explain."""

    component: str
    name: str


PAYLOAD_MODELS: Dict[Action, Type[ActionPayload]] = {
    Action.GENERATE_BUILD: GenerateBuildPayload,
    Action.ANALYZE_FPS: AnalyzeFpsPayload,
    Action.OPTIMIZE_BUILD: OptimizeBuildPayload,
    Action.EXPLAIN_COMPONENT: ExplainComponentPayload,
}
