"""HTTP API for notedesk (FastAPI)."""
