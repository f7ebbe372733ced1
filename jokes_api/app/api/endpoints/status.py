"""
Readiness endpoint.

``GET /`` answers with a fixed plain‑text message so that a developer
(or a process supervisor) can tell the server is up.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

READY_MESSAGE = "Server is ready!"

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def server_ready() -> str:
    """Return the readiness message."""
    return READY_MESSAGE
