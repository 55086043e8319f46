import random

import pytest

from daily_wallpaper.errors import DateNotFound, IndexOutOfRange, SelectionError
from daily_wallpaper.resolution import NamedResolutionPolicy
from daily_wallpaper.selection import (
    get_image_by_date,
    get_image_by_index,
    get_image_random,
    resolve_image,
    select_image,
)


def test_index_in_range(records):
    for i in range(len(records)):
        assert get_image_by_index(records, i) is records[i]


def test_negative_index_counts_from_end(records):
    n = len(records)
    for i in range(-n, 0):
        assert get_image_by_index(records, i) is records[n + i]
    assert get_image_by_index(records, -1).startdate == "20240101"


@pytest.mark.parametrize("index", [2, 5, -3, -100])
def test_index_out_of_range(records, index):
    with pytest.raises(IndexOutOfRange):
        get_image_by_index(records, index)


def test_by_date(records):
    assert get_image_by_date(records, "20240101").title == "Happy New Year"
    with pytest.raises(DateNotFound):
        get_image_by_date(records, "19991231")


def test_random_is_member(records):
    rng = random.Random(42)
    for _ in range(20):
        assert get_image_random(records, rng) in records


def test_random_on_empty_store():
    with pytest.raises(IndexOutOfRange):
        get_image_random([])


def test_selector_priority(records):
    # index beats date beats rand
    assert select_image(records, index=1, date="20240102", rand=True).startdate == "20240101"
    assert select_image(records, date="20240101", rand=True).startdate == "20240101"
    assert select_image(records).startdate == "20240102"


def test_index_zero_is_not_skipped(records):
    assert select_image(records, index=0, date="20240101").startdate == "20240102"


def test_selection_errors_are_lookup_errors():
    assert issubclass(IndexOutOfRange, LookupError)
    assert issubclass(DateNotFound, SelectionError)


def test_resolve_image_builds_url(records):
    image, url = resolve_image(records, NamedResolutionPolicy(), "https://www.bing.com", index=-1)
    assert image.startdate == "20240101"
    assert url == "https://www.bing.com/th?id=OHR.SydneyNY_EN-US0987654321_UHD.jpg&w=1920&h=1080"
