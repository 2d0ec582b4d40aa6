"""Search and page request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from yarl import URL


class SearchRequest(BaseModel):
    """One logical search query.

    Attributes:
        query: Free-text search query (Twitter search syntax)
        limit: Maximum number of records to yield (None = unlimited)
        min_id: Minimum tweet id; the first older record ends the stream
    """

    query: str = Field(..., min_length=1)
    limit: int | None = Field(None, ge=0)
    min_id: int | None = Field(None, ge=0)

    model_config = ConfigDict(frozen=True)


class PageRequest(BaseModel):
    """Parameters of a single page fetch."""

    base_url: str
    params: tuple[tuple[str, str], ...] = ()
    query: str
    cursor: str | None = None

    model_config = ConfigDict(frozen=True)

    def query_params(self) -> list[tuple[str, str]]:
        """Static params, then the query text, then the cursor if any."""
        pairs = list(self.params)
        pairs.append(("q", self.query))
        if self.cursor is not None:
            pairs.append(("cursor", self.cursor))
        return pairs

    @property
    def url(self) -> str:
        return str(URL(self.base_url).with_query(self.query_params()))
