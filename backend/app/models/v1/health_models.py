"""API models for the liveness endpoint."""

from __future__ import annotations

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str = "pong"
