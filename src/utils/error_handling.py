"""Custom exceptions and helpers for consistent error responses."""

from typing import Any, Dict, Optional

from models.response import ErrorEnvelope

MISSING_API_KEY_MESSAGE = "A chave da API do Gemini não foi configurada no servidor."
INVALID_ACTION_MESSAGE = "Ação inválida."
UPSTREAM_FAILURE_MESSAGE = "Houve um problema ao se comunicar com a IA."


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(AppError):
    """Raised when the server is missing required configuration."""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(message)


class InvalidActionError(AppError):
    """Raised when the client asks for an action we have no template for."""

    def __init__(self, action: Any = None):
        super().__init__(INVALID_ACTION_MESSAGE)
        self.action = action


class PayloadValidationError(AppError):
    """Raised when an action's payload is missing required fields."""


class UpstreamError(AppError):
    """Raised when the generative-language API fails or is unreachable."""

    def __init__(self, upstream_status: Optional[int] = None):
        super().__init__(UPSTREAM_FAILURE_MESSAGE)
        self.upstream_status = upstream_status


def error_response(message: str, status_code: int = 500) -> Dict[str, Any]:
    """Build a Lambda proxy response carrying the error envelope."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": ErrorEnvelope(error=message).model_dump_json(),
    }


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return error_response(str(error), error.status_code)
