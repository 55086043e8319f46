import json

import pytest

from daily_wallpaper.data_store import JsonImageStore
from daily_wallpaper.errors import StoreReadError


def test_load(store):
    data = store.load()
    assert [r.startdate for r in data] == ["20240102", "20240101"]


def test_load_projects_extra_fields(tmp_path, records):
    path = tmp_path / "images.json"
    path.write_text(json.dumps([dict(records[0].model_dump(), hsh="abc", enddate="20240103")]), encoding="utf-8")
    (record,) = JsonImageStore(str(path)).load()
    assert set(record.model_dump()) == {"startdate", "copyright", "urlbase", "title"}


@pytest.mark.parametrize("content", ["{not json", '{"images": []}', '[{"startdate": "2024"}]'])
def test_load_bad_store(tmp_path, content):
    path = tmp_path / "images.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StoreReadError):
        JsonImageStore(str(path)).load()


def test_load_missing_store(tmp_path):
    with pytest.raises(StoreReadError):
        JsonImageStore(str(tmp_path / "nope.json")).load()


def test_save_replaces_file(store, store_path, records):
    store.save(records[:1])
    assert json.loads(store_path.read_text(encoding="utf-8")) == [records[0].model_dump()]
    assert not store_path.with_name("images.json.tmp").exists()


def test_save_creates_parent_dir(tmp_path, records):
    path = tmp_path / "nested" / "images.json"
    JsonImageStore(str(path)).save(records)
    assert len(JsonImageStore(str(path)).load()) == 2
