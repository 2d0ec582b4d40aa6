"""Response adapters for Twitter REST endpoints."""

from __future__ import annotations

import json
from typing import Any

import pydantic

from ...core.exceptions import ParseError
from ...models import SearchPage, Tweet
from ...runtime.rest import ResponseAdapter
from .constants import CURSOR_PATTERN, EMBEDDED_USER_FIELD, USER_ID_FIELD
from .schemas import AdaptiveSearchResponse


def extract_cursor(timeline: dict[str, Any]) -> str:
    """Return the first scroll cursor embedded in the timeline.

    Raises:
        ParseError: No scroll cursor in the timeline
    """
    match = CURSOR_PATTERN.search(json.dumps(timeline))
    if match is None:
        raise ParseError("cursor not found")
    return match.group(1)


def merge_tweets(
    tweets: dict[str, dict[str, Any]], users: dict[str, dict[str, Any]]
) -> list[dict[str, Any]]:
    """Embed each tweet's author and order tweets by descending id key.

    Keys are compared as strings, so ids of different widths do not sort
    numerically ("9" comes before "10").
    """
    merged: list[dict[str, Any]] = []
    for key in sorted(tweets, reverse=True):
        tweet = dict(tweets[key])
        user_id = tweet.get(USER_ID_FIELD)
        user = users.get(user_id) if isinstance(user_id, str) else None
        if user is not None:
            tweet[EMBEDDED_USER_FIELD] = user
        merged.append(tweet)
    return merged


class SearchTimelineAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> SearchPage:
        try:
            raw = AdaptiveSearchResponse.model_validate(response)
        except pydantic.ValidationError as e:
            raise ParseError(f"could not parse tweets: {e}") from e

        rows = merge_tweets(raw.global_objects.tweets, raw.global_objects.users)
        cursor = extract_cursor(raw.timeline)
        return SearchPage(tweets=[Tweet.model_validate(row) for row in rows], cursor=cursor)
