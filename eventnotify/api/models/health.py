"""Health check response model."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health status with in-memory pipeline sizes."""

    status: str
    subscribers: int
    streaming_clients: int
    pending_deliveries: int
