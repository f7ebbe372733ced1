"""
Jokes endpoint.

``GET /api/jokes`` returns the whole joke list as a JSON array.  The
route takes no query parameters, path parameters or body; every call
returns the same five records in the same order.
"""

from typing import List

from fastapi import APIRouter

from jokes_api.app.schemas.joke import Joke
from jokes_api.app.services.joke_service import JokeService

router = APIRouter()


@router.get("", response_model=List[Joke])
async def list_jokes() -> List[Joke]:
    """Return all jokes ordered by ``id``."""
    return await JokeService.list_jokes()
