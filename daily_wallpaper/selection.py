# daily_wallpaper/selection.py
import random
from typing import Mapping, Optional, Sequence, Tuple

from daily_wallpaper.errors import DateNotFound, IndexOutOfRange
from daily_wallpaper.models import ImageRecord
from daily_wallpaper.resolution import ResolutionPolicy


def get_image_by_index(data: Sequence[ImageRecord], index: int) -> ImageRecord:
    n = len(data)
    # negative indexes count back from the oldest record, down to -n
    if index >= n or index < -n:
        raise IndexOutOfRange(index, n)
    if index < 0:
        return data[n + index]
    return data[index]


def get_image_by_date(data: Sequence[ImageRecord], date: str) -> ImageRecord:
    for item in data:
        if item.startdate == date:
            return item
    raise DateNotFound(date)


def get_image_random(data: Sequence[ImageRecord], rng: Optional[random.Random] = None) -> ImageRecord:
    n = len(data)
    if n == 0:
        raise IndexOutOfRange(0, 0)
    idx = (rng or random).randrange(n)
    return get_image_by_index(data, idx)


def select_image(
    data: Sequence[ImageRecord],
    index: Optional[int] = None,
    date: Optional[str] = None,
    rand: bool = False,
    rng: Optional[random.Random] = None,
) -> ImageRecord:
    """Pick one record: ``index`` beats ``date`` beats ``rand``; default is the newest."""
    if index is not None:
        return get_image_by_index(data, index)
    if date:
        return get_image_by_date(data, date)
    if rand:
        return get_image_random(data, rng)
    return get_image_by_index(data, 0)


def resolve_image(
    data: Sequence[ImageRecord],
    policy: ResolutionPolicy,
    base_url: str,
    *,
    index: Optional[int] = None,
    date: Optional[str] = None,
    rand: bool = False,
    resolution: Optional[str] = None,
    params: Optional[Mapping[str, object]] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[ImageRecord, str]:
    image = select_image(data, index=index, date=date, rand=rand, rng=rng)
    url = policy.build_url(base_url, image.urlbase, policy.parse(resolution), params or {})
    return image, url
