"""
Top‑level router for the API service.

The readiness route sits at the root, the jokes route under ``/api``.
Any other path falls through to FastAPI's default 404 handling.
"""

from fastapi import APIRouter

from .endpoints import jokes, status

router = APIRouter()

router.include_router(status.router, tags=["status"])
# The jokes router declares an empty path so that the list is served at
# ``/api/jokes`` exactly, without a trailing‑slash redirect.
router.include_router(jokes.router, prefix="/api/jokes", tags=["jokes"])
