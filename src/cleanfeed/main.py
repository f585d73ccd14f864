"""Main application entry point.

Wires the httpx transport into a RemoteFeedLoader, loads the feed once
and prints every item as a JSON line.
"""

import argparse
import asyncio
import sys

import structlog

from cleanfeed.api.httpx_client import HttpxHTTPClient
from cleanfeed.api.remote_feed_loader import RemoteFeedLoader
from cleanfeed.config.settings import Settings, settings
from cleanfeed.exceptions import FeedLoadError
from cleanfeed.feature.feed_item import FeedItem
from cleanfeed.utils.logger import configure_logging, get_logger


async def run_once(url: str, config: Settings = settings) -> list[FeedItem]:
    """Load the feed at url once."""
    logger = get_logger("cli")
    logger.info("Loading feed", url=url)

    async with HttpxHTTPClient(
        timeout=config.http_timeout,
        user_agent=config.http_user_agent,
        follow_redirects=config.http_follow_redirects,
    ) as client:
        loader = RemoteFeedLoader(url=url, client=client)
        items = await loader.load_feed()

    logger.info("Feed loaded", url=url, count=len(items))
    return items


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="CleanFeed - load a remote feed")
    parser.add_argument(
        "--url",
        default=settings.feed_url,
        help=f"Feed URL (default: {settings.feed_url})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.log_json,
        help="Emit logs as JSON",
    )
    args = parser.parse_args(argv)

    configure_logging(log_level=args.log_level, json_format=args.json_logs)
    structlog.contextvars.bind_contextvars(app=settings.app_name)

    try:
        items = asyncio.run(run_once(args.url))
    except FeedLoadError as e:
        get_logger("cli").error("Feed load failed", url=args.url, reason=e.reason.value)
        return 1

    for item in items:
        print(item.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
