"""
Settings for the lookup service and the update job.

Everything is read from environment variables once, when this module is
imported.  Set the variables before importing, or build a ``Settings``
by hand (tests do) and hand it to ``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # JSON array of image records; relative paths resolve against the cwd
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "images.json"))

    base_url: str = os.getenv("BASE_URL", "https://www.bing.com")

    # "named" (4k/1080p/... as w/h query hints) or "path" (_1920x1080.jpg)
    resolution_policy: str = os.getenv("RESOLUTION_POLICY", "named")

    feed_url: str = os.getenv("FEED_URL", "https://www.bing.com/HPImageArchive.aspx")
    feed_market: str = os.getenv("FEED_MARKET", "en-US")
    feed_count: int = int(os.getenv("FEED_COUNT", "10"))
    feed_timeout: float = float(os.getenv("FEED_TIMEOUT", "20.0"))

    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
