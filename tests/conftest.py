import json

import pytest
from fastapi.testclient import TestClient

from daily_wallpaper.config import Settings
from daily_wallpaper.data_store import JsonImageStore
from daily_wallpaper.main import create_app
from daily_wallpaper.models import ImageRecord

RECORDS = [
    {
        "startdate": "20240102",
        "copyright": "Snowy owl, Canada (© Jim Cumming/Getty Images)",
        "urlbase": "/th?id=OHR.SnowyOwl_EN-US1234567890",
        "title": "Winter watch",
    },
    {
        "startdate": "20240101",
        "copyright": "Fireworks over Sydney Harbour (© Ken Wolter/Shutterstock)",
        "urlbase": "/th?id=OHR.SydneyNY_EN-US0987654321",
        "title": "Happy New Year",
    },
]


@pytest.fixture
def records():
    return [ImageRecord(**r) for r in RECORDS]


@pytest.fixture
def store_path(tmp_path):
    path = tmp_path / "images.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def store(store_path):
    return JsonImageStore(str(store_path))


def _client(data_file, policy="named"):
    cfg = Settings(data_file=str(data_file), resolution_policy=policy, base_url="https://www.bing.com")
    return TestClient(create_app(cfg))


@pytest.fixture
def make_client():
    return _client


@pytest.fixture
def client(store_path):
    return _client(store_path)


@pytest.fixture
def path_client(store_path):
    return _client(store_path, policy="path")
