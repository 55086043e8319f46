# daily_wallpaper/routers/images.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import RedirectResponse

from daily_wallpaper.config import Settings, settings as default_settings
from daily_wallpaper.data_store import JsonImageStore
from daily_wallpaper.errors import SelectionError, StoreReadError
from daily_wallpaper.models import ImageOut, OutputFormat
from daily_wallpaper.resolution import ResolutionPolicy, get_policy
from daily_wallpaper.selection import resolve_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["images"])

KNOWN_PARAMS = {"resolution", "w", "h", "qlt", "index", "date", "rand", "format"}
SIZE_PARAMS = ("w", "h", "qlt")


def get_settings() -> Settings:
    return default_settings

def get_store(settings: Settings = Depends(get_settings)) -> JsonImageStore:
    return JsonImageStore(settings.data_file)

def get_resolution_policy(settings: Settings = Depends(get_settings)) -> ResolutionPolicy:
    return get_policy(settings.resolution_policy)


@router.get("", response_model=ImageOut)
@router.get("/", response_model=ImageOut, include_in_schema=False)
def get_image(
    request: Request,
    resolution: Optional[str] = None,
    w: Optional[int] = Query(None, ge=0),
    h: Optional[int] = Query(None, ge=0),
    qlt: Optional[int] = Query(None, ge=0, le=100),
    # an integer (negative counts from the oldest) or "random"
    index: Optional[str] = Query(None, pattern=r"^(-?\d+|random)$"),
    date: Optional[str] = Query(None, pattern=r"^\d{8}$"),
    rand: bool = False,
    format: Optional[OutputFormat] = None,
    settings: Settings = Depends(get_settings),
    store: JsonImageStore = Depends(get_store),
    policy: ResolutionPolicy = Depends(get_resolution_policy),
):
    # --- validate everything before touching the store ---
    unknown = [k for k in request.query_params.keys() if k not in KNOWN_PARAMS]
    if unknown and not policy.forwards_unknown_params:
        raise HTTPException(status_code=400, detail=f"unknown query parameter(s): {', '.join(sorted(set(unknown)))}")

    try:
        resolution = policy.parse(resolution)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if index == "random":
        idx, rand = None, True
    else:
        idx = int(index) if index is not None else None

    values = {"w": w, "h": h, "qlt": qlt}
    params = {k: values[k] for k in SIZE_PARAMS if values[k] is not None}
    # path policy only: pass everything else through untouched
    params.update((k, v) for k, v in request.query_params.items() if k not in KNOWN_PARAMS)

    # --- lookup ---
    try:
        data = store.load()
    except StoreReadError as e:
        logger.exception("store read failed")
        raise HTTPException(status_code=500, detail=str(e))

    try:
        image, url = resolve_image(
            data, policy, settings.base_url,
            index=idx, date=date, rand=rand,
            resolution=resolution, params=params,
        )
    except SelectionError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.debug("url: %s", url)

    if format == OutputFormat.json:
        return ImageOut(**image.model_dump(), url=url)
    return RedirectResponse(url, status_code=307)
