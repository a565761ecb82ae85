"""Shared response bodies: acknowledgements, errors and health."""

from typing import Literal

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement or not-found notice."""

    message: str = Field(..., description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Body returned for database failures (500)."""

    error: str = Field(..., description="Underlying database error message")


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV the service runs under")
    database: Literal["connected", "disconnected"]
