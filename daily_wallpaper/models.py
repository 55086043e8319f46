# daily_wallpaper/models.py
import enum

from pydantic import BaseModel, Field


# ----- Enums -----
class PolicyName(str, enum.Enum):
    named = "named"
    path = "path"


class OutputFormat(str, enum.Enum):
    json = "json"


# ----- Core: one image-of-the-day entry -----
class ImageRecord(BaseModel):
    # YYYYMMDD; fixed width so string order == date order
    startdate: str = Field(pattern=r"^\d{8}$")
    copyright: str
    # partial path, e.g. "/th?id=OHR.SomePlace_EN-US123"
    urlbase: str
    title: str

    # upstream feed items carry extra keys (enddate, hsh, ...); ignored on build


class ImageOut(ImageRecord):
    url: str
