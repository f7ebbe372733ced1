"""
Pydantic schema for jokes.

A joke is a flat record: an integer ``id`` assigned by its position in
the source list, a short ``title`` and the ``content`` text.  Instances
are frozen; the service hands out the same objects on every request.
"""

from pydantic import BaseModel, ConfigDict, Field


class Joke(BaseModel):
    """Schema for reading a joke."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Position of the joke in the list, starting at 1")
    title: str = Field(..., description="Short label shown as the joke heading")
    content: str = Field(..., description="Body text of the joke")
