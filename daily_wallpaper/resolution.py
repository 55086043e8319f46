"""
Resolution policies: how a requested display size becomes part of the
upstream image URL.

``NamedResolutionPolicy``
    ``resolution=1080p`` style names mapped to explicit ``w``/``h`` pairs.
    The image is always fetched as ``_UHD.jpg`` and sized through the
    ``w``/``h``/``qlt`` query hints.

``PathResolutionPolicy``
    ``resolution=1920x1080`` (or ``UHD``) goes straight into the path
    suffix, ``_1920x1080.jpg``.  Extra query parameters are passed
    through untouched.

The lookup code only sees a ``ResolutionPolicy``; which one is active is
a deployment setting (``RESOLUTION_POLICY``).
"""
import urllib.parse
from typing import Dict, Mapping, Optional, Tuple

from daily_wallpaper.models import PolicyName

RESOLUTION_SIZES: Dict[str, Dict[str, int]] = {
    "4k": {"w": 3840, "h": 2160},
    "2k": {"w": 2560, "h": 1440},
    "1080p": {"w": 1920, "h": 1080},
    "720p": {"w": 1280, "h": 720},
    "480p": {"w": 640, "h": 480},
}

# sizes the upstream CDN serves directly
PATH_RESOLUTIONS: Tuple[str, ...] = (
    "UHD",
    "1920x1200",
    "1920x1080",
    "1366x768",
    "1280x768",
    "1024x768",
    "800x600",
    "800x480",
    "768x1280",
    "720x1280",
    "640x480",
    "480x800",
    "400x240",
    "320x240",
    "240x320",
)


def _append_query(url: str, params: Mapping[str, object]) -> str:
    search = urllib.parse.urlencode(list(params.items()))
    if not search:
        return url
    # urlbase normally already carries "?id=..."
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{search}"


class ResolutionPolicy:
    name: PolicyName
    choices: Tuple[str, ...] = ()
    default: str = ""
    # pass unrecognised query params upstream instead of rejecting the request
    forwards_unknown_params: bool = False

    def parse(self, resolution: Optional[str]) -> str:
        if resolution is None:
            return self.default
        if resolution not in self.choices:
            raise ValueError(
                f"resolution must be one of: {', '.join(self.choices)}"
            )
        return resolution

    def build_url(self, base_url: str, urlbase: str, resolution: str, params: Mapping[str, object]) -> str:
        raise NotImplementedError


class NamedResolutionPolicy(ResolutionPolicy):
    name = PolicyName.named
    choices = tuple(RESOLUTION_SIZES)
    default = "1080p"

    def build_url(self, base_url, urlbase, resolution, params):
        query = dict(params)
        # explicit w/h from the caller win over the named size
        if "w" not in query and "h" not in query:
            query.update(RESOLUTION_SIZES[resolution])
        return _append_query(f"{base_url}{urlbase}_UHD.jpg", query)


class PathResolutionPolicy(ResolutionPolicy):
    name = PolicyName.path
    choices = PATH_RESOLUTIONS
    default = "1920x1080"
    forwards_unknown_params = True

    def build_url(self, base_url, urlbase, resolution, params):
        return _append_query(f"{base_url}{urlbase}_{resolution}.jpg", params)


_POLICIES = {
    PolicyName.named: NamedResolutionPolicy,
    PolicyName.path: PathResolutionPolicy,
}


def get_policy(name: str) -> ResolutionPolicy:
    try:
        return _POLICIES[PolicyName(name)]()
    except ValueError as e:
        raise ValueError(f"unknown resolution policy {name!r} (expected 'named' or 'path')") from e
