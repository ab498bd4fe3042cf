"""Shared lightweight schemas."""

from pydantic import BaseModel


class Message(BaseModel):
    """Response envelope holding one human-readable sentence."""

    message: str
