"""Incremental page-fetch engine for search results.

``SearchStream`` is an async iterator that turns one ``SearchRequest`` into a
sequence of tweets, fetching cursor-linked pages on demand.

Architecture:
    The stream owns a ``StreamState``: a FIFO buffer of decoded tweets, the
    cursor of the last page, counters and an explicit ``Termination``. Each
    pull either pops the buffer head or, when the buffer is empty, runs one
    encode -> fetch -> decode cycle through a ``RestRunner`` and tries again.

Stopping conditions:
    - LIMIT: the configured number of tweets has been yielded
    - FLOOR: the buffer head has an id below ``min_id`` (hard stop, not a filter)
    - ERROR: a fetch, decode or id validation failed; the error is raised once
    - EXHAUSTED: ``max_empty_pages`` consecutive pages came back empty
    - CLOSED: the consumer called ``aclose()``

Once terminated no further page is fetched. State is only mutated after a
page is fully fetched and decoded, so cancelling a pull at any await is safe.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from time import perf_counter
from typing import TYPE_CHECKING, NoReturn

from ..core.exceptions import ValidationError
from ..models import SearchPage, SearchRequest, Tweet
from ..providers.twitter import SearchTimelineAdapter, search_spec
from ..runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner
from ..runtime.telemetry import log_page_error, log_page_fetched, log_stream_terminated

if TYPE_CHECKING:
    from ..auth.context import AuthContext


class TerminationReason(str, Enum):
    LIMIT = "limit"
    FLOOR = "floor"
    ERROR = "error"
    EXHAUSTED = "exhausted"
    CLOSED = "closed"


@dataclass(frozen=True)
class Termination:
    """Why a stream ended; ``error`` is set only for ERROR."""

    reason: TerminationReason
    error: Exception | None = None


@dataclass
class StreamState:
    buffer: deque[Tweet] = field(default_factory=deque)
    cursor: str | None = None
    yielded: int = 0
    pages_fetched: int = 0
    empty_pages: int = 0
    termination: Termination | None = None

    @property
    def terminated(self) -> bool:
        return self.termination is not None


class SearchStream:
    """Lazily pulled sequence of tweets for one search request.

    Example:
        >>> async for tweet in SearchStream(request, auth, RestRunner(http)):
        ...     print(tweet.id_str)
    """

    def __init__(
        self,
        request: SearchRequest,
        auth: AuthContext,
        runner: RestRunner,
        *,
        spec: RestEndpointSpec | None = None,
        adapter: ResponseAdapter | None = None,
        max_empty_pages: int | None = None,
    ) -> None:
        self.request = request
        self._auth = auth
        self._runner = runner
        self._spec = spec or search_spec()
        self._adapter = adapter or SearchTimelineAdapter()
        self._max_empty_pages = max_empty_pages
        self._state = StreamState()

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def termination(self) -> Termination | None:
        return self._state.termination

    def __aiter__(self) -> SearchStream:
        return self

    async def __anext__(self) -> Tweet:
        state = self._state
        while True:
            if state.terminated:
                raise StopAsyncIteration

            limit = self.request.limit
            if limit is not None and state.yielded >= limit:
                self._terminate(TerminationReason.LIMIT)
                continue

            if state.buffer:
                tweet = state.buffer.popleft()
                if self.request.min_id is not None and self._below_floor(tweet):
                    self._terminate(TerminationReason.FLOOR)
                    continue
                state.yielded += 1
                return tweet

            await self._fetch_next_page()

    async def aclose(self) -> None:
        """Stop the stream; later pulls end immediately."""
        if not self._state.terminated:
            self._terminate(TerminationReason.CLOSED)

    def _below_floor(self, tweet: Tweet) -> bool:
        try:
            tweet_id = tweet.parse_id()
        except ValidationError as e:
            self._fail(e)
        return tweet_id < self.request.min_id  # type: ignore[operator]

    async def _fetch_next_page(self) -> None:
        state = self._state
        page_index = state.pages_fetched
        start = perf_counter()
        try:
            page: SearchPage = await self._runner.run(
                spec=self._spec,
                adapter=self._adapter,
                params={"request": self.request, "cursor": state.cursor, "auth": self._auth},
            )
        except Exception as e:
            log_page_error(
                query=self.request.query,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            self._fail(e)

        log_page_fetched(
            query=self.request.query,
            page_index=page_index,
            records=len(page.tweets),
            has_cursor=state.cursor is not None,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        state.pages_fetched += 1
        state.buffer.extend(page.tweets)
        state.cursor = page.cursor

        if page.is_empty:
            state.empty_pages += 1
            if self._max_empty_pages is not None and state.empty_pages >= self._max_empty_pages:
                self._terminate(TerminationReason.EXHAUSTED)
        else:
            state.empty_pages = 0

    def _fail(self, error: Exception) -> NoReturn:
        self._terminate(TerminationReason.ERROR, error)
        raise error

    def _terminate(self, reason: TerminationReason, error: Exception | None = None) -> None:
        self._state.termination = Termination(reason=reason, error=error)
        log_stream_terminated(
            query=self.request.query,
            reason=reason.value,
            yielded=self._state.yielded,
            pages_fetched=self._state.pages_fetched,
        )
