"""
Service layer for jokes.

The jokes are hard‑coded and compiled into the service at import
time.  Nothing in the API creates, updates or deletes a joke, so the
data is kept in a tuple of frozen models and shared by all requests.
"""

from __future__ import annotations

from typing import List, Tuple

from jokes_api.app.schemas.joke import Joke


def _build_jokes(*rows: Tuple[str, str]) -> Tuple[Joke, ...]:
    """Number ``(title, content)`` rows from 1 in source order."""
    return tuple(
        Joke(id=position, title=title, content=content)
        for position, (title, content) in enumerate(rows, start=1)
    )


JOKES: Tuple[Joke, ...] = _build_jokes(
    ("Joke 1", "This is a sample Joke"),
    ("Joke 2", "This is another sample Joke"),
    ("Joke 3", "This is yet another sample Joke"),
    ("Joke 4", "This is yet another sample Joke"),
    ("Joke 5", "This is yet another sample Joke"),
)


class JokeService:
    """Read access to the fixed joke list."""

    @classmethod
    async def list_jokes(cls) -> List[Joke]:
        """Return every joke in source order.

        A new list is built on each call so callers may reorder or
        extend the result without affecting later requests.
        """
        return list(JOKES)

    @classmethod
    def count(cls) -> int:
        return len(JOKES)
