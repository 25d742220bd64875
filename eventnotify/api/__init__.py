"""HTTP layer for EventNotify (FastAPI)."""
