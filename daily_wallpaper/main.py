"""
FastAPI application for the daily wallpaper lookup service.

Serve with uvicorn::

    uvicorn daily_wallpaper.main:app

or through the ``daily-wallpaper-serve`` script, which reads ``HOST`` and
``PORT`` from the environment.
"""
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from daily_wallpaper.config import Settings, settings as default_settings
from daily_wallpaper.logging_config import setup_logging
from daily_wallpaper.resolution import get_policy
from daily_wallpaper.routers.images import get_settings, router as images_router


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    cfg = cfg or default_settings
    setup_logging(cfg.log_level)
    # fail at startup, not on the first request
    get_policy(cfg.resolution_policy)

    app = FastAPI(title="Daily Wallpaper API")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"])

    # Routers
    app.include_router(images_router)
    app.dependency_overrides[get_settings] = lambda: cfg

    # bad query strings are a plain client error here, not 422
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    # --- Health ---
    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
