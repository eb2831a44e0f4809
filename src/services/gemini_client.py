"""
Gemini generateContent client.

Thin wrapper around a single HTTPS POST. The API key travels as the `key`
query parameter, so it is kept out of every log line.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests

from utils.error_handling import ConfigurationError, UpstreamError
from utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiClient:
    """Send prompt payloads to the generative-language API."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        api_base: str = DEFAULT_API_BASE,
        timeout: Optional[float] = None,
    ):
        if not api_key:
            raise ConfigurationError()
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_environment(cls) -> "GeminiClient":
        """Build a client from Lambda environment variables."""
        timeout = os.environ.get("GEMINI_TIMEOUT_SECONDS")
        return cls(
            api_key=os.environ.get("GEMINI_API_KEY", ""),
            model=os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL,
            api_base=os.environ.get("GEMINI_API_BASE") or DEFAULT_API_BASE,
            timeout=float(timeout) if timeout else None,
        )

    @property
    def endpoint(self) -> str:
        """Endpoint URL without the credential."""
        return f"{self.api_base}/models/{self.model}:generateContent"

    def generate_content(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST the prompt payload and return the upstream JSON untouched."""
        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error(
                "Gemini request failed",
                extra={"endpoint": self.endpoint, "error": type(exc).__name__},
            )
            raise UpstreamError() from exc

        if not 200 <= response.status_code < 300:
            logger.error(
                "Gemini API error",
                extra={
                    "endpoint": self.endpoint,
                    "status_code": response.status_code,
                    "upstream_body": response.text,
                },
            )
            raise UpstreamError(upstream_status=response.status_code)

        return response.json()
