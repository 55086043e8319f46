"""
Update job: pull the latest images from the feed into the JSON store.

Meant to be run from cron or a timer, e.g.::

    daily-wallpaper-sync

Re-running it without anything new upstream rewrites the same bytes.
"""

import asyncio
import logging
import sys
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from daily_wallpaper.config import Settings, settings as default_settings
from daily_wallpaper.data_store import JsonImageStore
from daily_wallpaper.errors import WallpaperError
from daily_wallpaper.feed import fetch_latest_images
from daily_wallpaper.logging_config import setup_logging
from daily_wallpaper.models import ImageRecord

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[List[ImageRecord]]]


def merge_images(
    existing: Sequence[ImageRecord], fetched: Sequence[ImageRecord]
) -> Tuple[List[ImageRecord], List[ImageRecord]]:
    """Return ``(merged, added)``; ``merged`` is sorted newest first."""
    seen = {item.startdate for item in existing}
    added = [item for item in fetched if item.startdate not in seen]

    merged = list(existing) + added
    # sort is stable, so equal dates keep their current order
    merged.sort(key=lambda item: item.startdate, reverse=True)
    return merged, added


async def sync_store(store: JsonImageStore, fetch: Fetcher) -> List[ImageRecord]:
    # fetch first: a feed failure must leave the store untouched
    fetched = await fetch()
    existing = store.load()

    merged, added = merge_images(existing, fetched)
    store.save(merged)

    for item in added:
        logger.info("added %s %s", item.startdate, item.title)
    logger.info("store now holds %d images (%d new)", len(merged), len(added))
    return added


def build_fetcher(cfg: Settings) -> Fetcher:
    async def fetch() -> List[ImageRecord]:
        return await fetch_latest_images(
            cfg.feed_url,
            market=cfg.feed_market,
            count=cfg.feed_count,
            timeout=cfg.feed_timeout,
        )
    return fetch


def main(cfg: Optional[Settings] = None) -> int:
    cfg = cfg or default_settings
    setup_logging(cfg.log_level)
    store = JsonImageStore(cfg.data_file)
    try:
        asyncio.run(sync_store(store, build_fetcher(cfg)))
    except WallpaperError as e:
        logger.error("sync aborted: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
