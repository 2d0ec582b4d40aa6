"""Decoded search page model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .tweet import Tweet


class SearchPage(BaseModel):
    """Tweets of one page, newest-first by id key, and the cursor to the next page."""

    tweets: list[Tweet]
    cursor: str

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.tweets)

    @property
    def is_empty(self) -> bool:
        return not self.tweets
