#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from tweet_scraper import TweetScraper


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the newest tweets for a search query")
    p.add_argument("query", nargs="?", default="from:nasa filter:images")
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("--headers", help="load persisted headers instead of starting a browser")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.headers:
        scraper = TweetScraper.from_header_file(args.headers)
    else:
        scraper = await TweetScraper.initialize()

    async with scraper:
        print("=" * 80)
        print(f"Query : {args.query}")
        print(f"Limit : {args.limit}")
        print("=" * 80)
        async for tweet in scraper.tweets(args.query, limit=args.limit):
            user = (tweet.user or {}).get("screen_name", "?")
            text = tweet.to_dict().get("full_text", "").replace("\n", " ")
            print(f"{tweet.id_str:>20} | @{user:<15} | {text[:60]}")
        print("=" * 80)


if __name__ == "__main__":
    asyncio.run(main())
