"""Catch-all GET/HEAD route — directory index pages and plain files."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from shs.api.deps import get_app_settings
from shs.config import Settings
from shs.errors import DecodingError, NotADirectory, NotFound, PathEscape, PermissionDenied
from shs.schemas.index import SortSpec
from shs.services.index_view import build_listing
from shs.services.scanner import resolve_path
from shs.utils.pathcodec import SEGMENT_SAFE, decode, encode

logger = logging.getLogger(__name__)
router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
INDEX_FILES = ("index.html", "index.htm")
RAW_PATH_SAFE = "/%" + SEGMENT_SAFE

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _raw_request_path(request: Request) -> str:
    """Request path still percent-encoded, without the query string."""
    raw = request.scope.get("raw_path")
    if raw:
        # Bare non-ASCII bytes become %XX so they decode as UTF-8 like escaped ones.
        return quote(raw.split(b"?", 1)[0], safe=RAW_PATH_SAFE)
    return quote(request.scope["path"])


def _finalize(response: Response, request: Request, settings: Settings) -> Response:
    if not settings.cache_enabled:
        response.headers["Cache-Control"] = "no-store"
    if request.method == "HEAD" and not isinstance(response, FileResponse):
        # Keep status and headers (including Content-Length), drop the body.
        return Response(status_code=response.status_code, headers=dict(response.headers))
    return response


@router.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
async def serve_path(
    request: Request,
    full_path: str,
    sort: str | None = None,
    order: str | None = None,
    settings: Settings = Depends(get_app_settings),
):
    """Serve a file, or render the sortable index of a directory."""
    raw_path = _raw_request_path(request)

    try:
        segments = decode(raw_path)
        target = resolve_path(settings.root, segments)

        if target.is_file():
            return _finalize(FileResponse(target), request, settings)

        if target.is_dir():
            if not raw_path.endswith("/"):
                location = encode(segments, trailing_slash=True, leading_slash=True)
                if request.url.query:
                    location += "?" + request.url.query
                return _finalize(RedirectResponse(location, status_code=301), request, settings)

            if settings.index_enabled:
                for name in INDEX_FILES:
                    try:
                        index_file = resolve_path(settings.root, (*segments, name))
                    except PathEscape:
                        logger.info("Skipping index file outside root: %s", target / name)
                        continue
                    if index_file.is_file():
                        return _finalize(FileResponse(index_file), request, settings)

        spec = SortSpec.from_query(sort, order)
        view = await run_in_threadpool(
            build_listing, target, segments, spec, settings.sort_enabled
        )
    except DecodingError as exc:
        raise HTTPException(400, str(exc))
    except PermissionDenied as exc:
        logger.info("Permission denied: %s", exc.path)
        raise HTTPException(403, "Forbidden")
    except PathEscape as exc:
        logger.info("Rejected path outside root: %s", exc.path)
        raise HTTPException(404, "Not Found")
    except NotADirectory:
        raise HTTPException(404, "Not Found")
    except NotFound:
        fallback = settings.try_file_path
        if fallback is not None:
            return _finalize(FileResponse(fallback), request, settings)
        raise HTTPException(404, "Not Found")

    response = templates.TemplateResponse(request, "index.jinja2", {"view": view})
    return _finalize(response, request, settings)
