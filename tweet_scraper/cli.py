"""Command line entry point: stream search results as JSON lines."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import TextIO

from .clients import SearchStream, TweetScraper
from .core import DEFAULT_RETRY_INTERVAL, RetryPolicy, ScraperError
from .providers.twitter import ScraperConfig

logger = logging.getLogger("tweet_scraper.cli")


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value!r}")
    return n


def _positive_int(value: str) -> int:
    n = _non_negative_int(value)
    if n == 0:
        raise argparse.ArgumentTypeError("must be >= 1")
    return n


def _non_negative_float(value: str) -> float:
    try:
        f = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if f < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value!r}")
    return f


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tweet-scraper",
        description="Stream Twitter search results as JSON lines",
    )
    p.add_argument("-q", "--query", required=True, help="search query")
    p.add_argument("-l", "--limit", type=_non_negative_int, help="maximum number of tweets")
    p.add_argument(
        "-m", "--min-id", type=_non_negative_int, help="stop at the first tweet with a lower id"
    )
    headers = p.add_mutually_exclusive_group()
    headers.add_argument(
        "--save-headers", metavar="PATH", help="save freshly bootstrapped headers to PATH"
    )
    headers.add_argument(
        "--load-headers", metavar="PATH", help="load headers from PATH instead of bootstrapping"
    )
    p.add_argument(
        "--retry-interval",
        type=_non_negative_float,
        default=DEFAULT_RETRY_INTERVAL,
        help="seconds to wait before retrying a rate-limited request (default: %(default)s)",
    )
    p.add_argument(
        "--max-retries", type=_non_negative_int, help="give up after N retries (default: never)"
    )
    p.add_argument(
        "--max-empty-pages",
        type=_positive_int,
        help="stop after N consecutive empty pages (default: never)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> ScraperConfig:
    return ScraperConfig(
        retry=RetryPolicy(interval=args.retry_interval, max_retries=args.max_retries),
        max_empty_pages=args.max_empty_pages,
    )


async def emit(stream: SearchStream, out: TextIO) -> int:
    """Write every tweet of ``stream`` to ``out``; returns the number written."""
    count = 0
    async for tweet in stream:
        out.write(json.dumps(tweet.to_dict(), ensure_ascii=False))
        out.write("\n")
        out.flush()
        count += 1
    return count


async def run(args: argparse.Namespace, out: TextIO | None = None) -> int:
    config = build_config(args)
    if args.load_headers:
        scraper = TweetScraper.from_header_file(args.load_headers, config=config)
    else:
        scraper = await TweetScraper.initialize(config)
        if args.save_headers:
            scraper.save_headers(args.save_headers)

    async with scraper:
        stream = scraper.tweets(args.query, limit=args.limit, min_id=args.min_id)
        count = await emit(stream, out or sys.stdout)
    logger.info("done", extra={"tweets": count})
    return 0


def _silence_stdout() -> None:
    # Python flushes stdout again at exit; point it at devnull so that flush
    # cannot raise a second BrokenPipeError.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        return asyncio.run(run(args))
    except BrokenPipeError:
        _silence_stdout()
        return 0
    except ScraperError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("could not write results: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
