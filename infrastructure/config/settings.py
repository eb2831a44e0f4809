"""
Environment-specific deployment settings.

Small defaults: one Lambda making one outbound call per request.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings read at synth time."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region

    # Gemini Configuration
    gemini_model: str = "gemini-2.0-flash"
    gemini_api_key: str = ""  # Injected into the function environment
    gemini_timeout_seconds: str = ""  # Empty keeps the HTTP client default

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 30
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        common = {
            "aws_region": os.environ.get("AWS_REGION", cls.aws_region),
            "gemini_model": os.environ.get("GEMINI_MODEL", cls.gemini_model),
            "gemini_api_key": os.environ.get("GEMINI_API_KEY", ""),
            "gemini_timeout_seconds": os.environ.get("GEMINI_TIMEOUT_SECONDS", ""),
        }

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                lambda_memory_mb=512,
                lambda_timeout_seconds=60,
                log_level="WARNING",
                **common,
            )

        return cls(environment=env, **common)
