"""Response envelopes returned to the caller."""

from pydantic import BaseModel


class ErrorEnvelope(BaseModel):
    """Uniform body for every failed request."""

    error: str
