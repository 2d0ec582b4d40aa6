"""Twitter adaptive search raw response schemas.

These models describe only the parts of the payload the decoder relies on.
Tweets, users and the timeline stay opaque JSON objects.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GlobalObjects(BaseModel):
    """Denormalized entities of one page, keyed by id string."""

    tweets: dict[str, dict[str, Any]]
    users: dict[str, dict[str, Any]]


class AdaptiveSearchResponse(BaseModel):
    """Raw adaptive search response."""

    global_objects: GlobalObjects = Field(..., alias="globalObjects")
    timeline: dict[str, Any]

    model_config = {"populate_by_name": True}
