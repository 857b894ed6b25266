"""General HTTP Schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool = True
    ts: int


class SweepResponse(HealthResponse):
    swept: int = 0
