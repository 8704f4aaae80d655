"""shs FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shs import __version__
from shs.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _setup_logging(settings: Settings) -> None:
    level = logging.CRITICAL if settings.silent else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory. Each app carries its own immutable settings."""
    from shs.api.routes import api_router

    settings = settings or get_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        _setup_logging(settings)
        logger.info(
            "shs v%s serving %s on %s:%s (sort=%s, index=%s, cache=%s)",
            __version__, settings.root, settings.host, settings.port,
            settings.sort_enabled, settings.index_enabled, settings.cache_enabled,
        )
        try:
            yield
        finally:
            logger.info("shs shutting down")

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    if settings.cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "HEAD"],
            allow_headers=["*"],
        )

    app.include_router(api_router)
    return app


def _export_env(settings: Settings) -> None:
    """Expose settings to worker processes, which rebuild them from SHS_* vars."""
    for name, value in settings.model_dump().items():
        if value is not None:
            os.environ[f"SHS_{name.upper()}"] = str(value)


def run(settings: Settings | None = None, **kwargs: Any) -> None:
    import uvicorn

    settings = settings or get_settings()
    options = dict(
        host=settings.host,
        port=settings.port,
        log_level="critical" if settings.silent else settings.log_level.lower(),
        access_log=not settings.silent,
        **kwargs,
    )
    if settings.threads and settings.threads > 1:
        # uvicorn only spawns workers from an import string
        _export_env(settings)
        uvicorn.run("shs.main:create_app", factory=True, workers=settings.threads, **options)
    else:
        uvicorn.run(create_app(settings), **options)
