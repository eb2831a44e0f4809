"""Pydantic models for API payloads."""

from models.actions import (  # noqa: F401
    PAYLOAD_MODELS,
    Action,
    ActionPayload,
    AnalyzeFpsPayload,
    ExplainComponentPayload,
    GenerateBuildPayload,
    OptimizeBuildPayload,
)
from models.response import ErrorEnvelope  # noqa: F401
