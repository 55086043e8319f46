# daily_wallpaper/errors.py


class WallpaperError(Exception):
    pass


# ----- Lookup: valid request, no matching record -----
class SelectionError(WallpaperError, LookupError):
    pass


class IndexOutOfRange(SelectionError):
    def __init__(self, index: int, size: int):
        super().__init__(f"Out of 'index' range! (index={index}, size={size})")
        self.index = index
        self.size = size


class DateNotFound(SelectionError):
    def __init__(self, date: str):
        super().__init__(f"Out of 'date' range! (date={date})")
        self.date = date


# ----- Store / upstream faults -----
class StoreReadError(WallpaperError):
    pass


class UpstreamFetchError(WallpaperError):
    pass
