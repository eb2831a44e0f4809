"""Lightweight health check handler."""

import json
import os
from datetime import datetime, timezone

from services.gemini_client import DEFAULT_MODEL


def lambda_handler(event, context):
    """
    Report liveness and whether the upstream credential is present.

    Never calls Gemini, so probing the endpoint costs nothing.
    """
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": os.environ.get("ENVIRONMENT", "dev"),
                "model": os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL,
                "api_key_configured": bool(os.environ.get("GEMINI_API_KEY")),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
