from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Liveness probe payload."""

    version: str = Field(..., examples=["1.0.0"])
    status: str = Field(..., examples=["ok"])
    timestamp: str = Field(..., examples=["2026-01-05 14:03:00"])
    environment: str = Field(..., examples=["development"])
