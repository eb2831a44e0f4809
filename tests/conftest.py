"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import dispatcher` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import json
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Lambda environment variables used by handlers. Tests never hit the network.
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("GEMINI_API_KEY", "test-api-key")
os.environ.setdefault("LOG_LEVEL", "CRITICAL")


def _make_event(body=None, method="POST", path="/api", base64_encoded=False):
    """Build an API Gateway HTTP API (v2) style event."""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return {
        "rawPath": path,
        "requestContext": {"http": {"method": method, "path": path}},
        "body": body,
        "isBase64Encoded": base64_encoded,
    }


def _make_upstream_response(status_code=200, payload=None, text=""):
    """Fake requests.Response with just the attributes the client reads."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text or json.dumps(payload or {})
    response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def api_key(monkeypatch):
    """Guarantee a credential is configured for the test."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-api-key")
    return "test-api-key"


@pytest.fixture
def make_event():
    return _make_event


@pytest.fixture
def upstream_response():
    return _make_upstream_response
