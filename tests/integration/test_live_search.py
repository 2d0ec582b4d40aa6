"""Live search against the real API.

Requires network access and a local Chrome for the guest token bootstrap.
"""

import os

import pytest

from tweet_scraper import TweetScraper

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("RUN_TWEET_SCRAPER_NETWORK_TESTS") != "1",
        reason="Requires network access. Set RUN_TWEET_SCRAPER_NETWORK_TESTS=1 to run",
    ),
]


@pytest.mark.asyncio
async def test_live_search_limit():
    async with await TweetScraper.initialize() as scraper:
        tweets = await scraper.collect("python", limit=5)

    assert len(tweets) <= 5
    for tweet in tweets:
        assert tweet.id_str
        assert tweet.parse_id() > 0
