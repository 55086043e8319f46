# daily_wallpaper/feed.py
import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from daily_wallpaper.errors import UpstreamFetchError
from daily_wallpaper.models import ImageRecord

logger = logging.getLogger(__name__)


def feed_params(market: str = "en-US", count: int = 10) -> dict:
    # idx=0: start from today; n: how many days back
    return {"format": "js", "idx": 0, "n": count, "mkt": market}


async def _get(url: str, *, params: dict, timeout: float, transport: Optional[httpx.AsyncBaseTransport]) -> httpx.Response:
    async with httpx.AsyncClient(follow_redirects=True, timeout=timeout, transport=transport) as client:
        try:
            r = await client.get(url, params=params)
        except httpx.HTTPError as e:
            raise UpstreamFetchError(f"feed network error: {e}") from e
    if r.status_code != 200:
        raise UpstreamFetchError(f"feed HTTP {r.status_code}")
    return r


async def fetch_latest_images(
    url: str,
    *,
    market: str = "en-US",
    count: int = 10,
    timeout: float = 20.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[ImageRecord]:
    """
    Fetch the most recent ``count`` images from the image-of-the-day feed,
    newest first, projected down to the four stored fields.
    """
    r = await _get(url, params=feed_params(market, count), timeout=timeout, transport=transport)
    try:
        payload = r.json()
        images = payload["images"]
        records = [ImageRecord.model_validate(item) for item in images]
    except (ValueError, KeyError, TypeError, ValidationError) as e:
        raise UpstreamFetchError(f"malformed feed payload: {e}") from e

    logger.info("fetched %d images from feed", len(records))
    return records
