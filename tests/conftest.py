"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from tweet_scraper.auth import AuthContext


def build_payload(
    ids: list[str],
    cursor: str | None = "scroll:AAA",
    users: dict[str, dict[str, Any]] | None = None,
    author: str | None = "1",
) -> dict[str, Any]:
    """Build an adaptive search body with one tweet per id.

    Every tweet points at ``author``; ``users`` defaults to a single user with
    that id. A None cursor produces a timeline without a scroll cursor.
    """
    tweets = {
        tweet_id: {
            "id_str": tweet_id,
            "full_text": f"tweet {tweet_id}",
            "user_id_str": author,
        }
        for tweet_id in ids
    }
    if users is None:
        users = {"1": {"id_str": "1", "screen_name": "alice"}} if author == "1" else {}

    entries: list[dict[str, Any]] = [{"entryId": "sq-I-t-1", "content": {"item": {}}}]
    if cursor is not None:
        entries.append(
            {
                "entryId": "sq-cursor-bottom",
                "content": {"operation": {"cursor": {"value": cursor, "cursorType": "Bottom"}}},
            }
        )
    return {
        "globalObjects": {"tweets": tweets, "users": users},
        "timeline": {"id": "search-6", "instructions": [{"addEntries": {"entries": entries}}]},
    }


def make_response(status: int = 200, body: Any = None) -> AsyncMock:
    """Mock aiohttp response usable as ``async with session.get(...)``."""
    response = AsyncMock()
    response.status = status
    response.json = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(*responses: Any) -> MagicMock:
    """Mock aiohttp session returning ``responses`` from successive get() calls."""
    session = MagicMock()
    session.closed = False
    session.get = MagicMock(side_effect=list(responses))
    session.close = AsyncMock()
    return session


@pytest.fixture
def auth() -> AuthContext:
    return AuthContext.for_guest("1234567890")


@pytest.fixture
def payload_factory():
    return build_payload


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def session_factory():
    return make_session
