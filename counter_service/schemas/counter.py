"""Pydantic schemas for counter reads and increments."""

from pydantic import BaseModel, Field

from counter_service.services.counter import COUNTER_MAX


class IncrementRequest(BaseModel):
    """Payload for increment requests; only whole non-negative numbers are accepted."""

    value: int = Field(..., ge=0, le=COUNTER_MAX, strict=True)
