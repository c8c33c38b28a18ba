"""Response envelopes shared by all endpoints."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Success message."""

    message: str


class ErrorResponse(BaseModel):
    """Error envelope."""

    error: str
