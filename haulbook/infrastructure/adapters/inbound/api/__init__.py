"""HTTP API (FastAPI) inbound adapter."""
