"""
Name: ASGI Entrypoint (paydesk.main)

Responsibilities:
  - Re-export the FastAPI app for ASGI servers (uvicorn paydesk.main:app)

Notes:
  - No configuration or IO here; wiring lives in paydesk.api.main
"""

from paydesk.api.main import app

__all__ = ["app"]
