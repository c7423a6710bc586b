"""Pydantic schema for the ping endpoint."""

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    message: str = Field(..., description="Static health-check reply.")
