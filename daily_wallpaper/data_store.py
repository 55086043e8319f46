# daily_wallpaper/data_store.py
import json
import logging
import os
from typing import List

from pydantic import ValidationError

from daily_wallpaper.errors import StoreReadError
from daily_wallpaper.models import ImageRecord

logger = logging.getLogger(__name__)


class JsonImageStore:
    """
    A single JSON file holding ``[{startdate, copyright, urlbase, title}, ...]``,
    newest first.  Read whole, written whole; nothing is cached between calls.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[ImageRecord]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise StoreReadError(f"store file not found: {self.path}") from e
        except (OSError, ValueError) as e:
            raise StoreReadError(f"cannot read store {self.path}: {e}") from e

        if not isinstance(raw, list):
            raise StoreReadError(f"{self.path} does not contain a JSON list")
        try:
            return [ImageRecord.model_validate(item) for item in raw]
        except ValidationError as e:
            raise StoreReadError(f"invalid record in {self.path}: {e}") from e

    def save(self, records: List[ImageRecord]) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        # write next to the target, then swap; readers never see a partial file
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump([r.model_dump() for r in records], f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp, self.path)
        logger.debug("wrote %d records to %s", len(records), self.path)
