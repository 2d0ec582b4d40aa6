"""High-level scraper facade.

``TweetScraper`` owns the HTTP client and the credentials, and hands out one
``SearchStream`` per query.
"""

from __future__ import annotations

from pathlib import Path

from ..auth.bootstrap import bootstrap_auth
from ..auth.context import AuthContext
from ..auth.persistence import load_auth, save_auth
from ..models import SearchRequest, Tweet
from ..providers.twitter import ScraperConfig, SearchQueryEncoder, SearchTimelineAdapter, search_spec
from ..runtime.rest import HTTPClient, RestRunner
from .search_stream import SearchStream


class TweetScraper:
    """Search client bound to one set of credentials.

    Example:
        >>> async with await TweetScraper.initialize() as scraper:
        ...     async for tweet in scraper.tweets("from:nasa", limit=10):
        ...         print(tweet.to_dict())
    """

    def __init__(
        self,
        auth: AuthContext,
        *,
        config: ScraperConfig | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self.auth = auth
        self.config = config or ScraperConfig()
        self._http = http or HTTPClient(timeout=self.config.timeout, retry=self.config.retry)
        self._runner = RestRunner(self._http)
        self._spec = search_spec(
            SearchQueryEncoder(self.config.base_url, self.config.static_params)
        )
        self._adapter = SearchTimelineAdapter()

    @classmethod
    async def initialize(cls, config: ScraperConfig | None = None) -> TweetScraper:
        """Bootstrap guest credentials through a browser and build a scraper."""
        auth = await bootstrap_auth(config)
        return cls(auth, config=config)

    @classmethod
    def from_header_file(cls, path: str | Path, config: ScraperConfig | None = None) -> TweetScraper:
        """Build a scraper from headers persisted with ``save_headers``."""
        return cls(load_auth(path), config=config)

    def save_headers(self, path: str | Path) -> None:
        save_auth(self.auth, path)

    def tweets(
        self, query: str, limit: int | None = None, min_id: int | None = None
    ) -> SearchStream:
        """Stream tweets matching ``query``, newest pages first."""
        return self.stream(SearchRequest(query=query, limit=limit, min_id=min_id))

    def stream(self, request: SearchRequest) -> SearchStream:
        return SearchStream(
            request,
            self.auth,
            self._runner,
            spec=self._spec,
            adapter=self._adapter,
            max_empty_pages=self.config.max_empty_pages,
        )

    async def collect(
        self, query: str, limit: int | None = None, min_id: int | None = None
    ) -> list[Tweet]:
        """Drain a stream into a list; errors propagate."""
        return [tweet async for tweet in self.tweets(query, limit=limit, min_id=min_id)]

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> TweetScraper:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
