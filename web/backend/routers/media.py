from pathlib import Path
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse
from loguru import logger

from music_catalog.core.path_security import is_path_within_root
from music_catalog.domain.library import InvalidNameError, TrackStore
from ..deps import get_store
from ..views import STATIC_DIR, render_not_found

router = APIRouter()

AUDIO_MEDIA_TYPE = "audio/mpeg"
COVER_MEDIA_TYPE = "image/png"


def _serve_track_file(
    request: Request,
    name: str,
    store: TrackStore,
    locate: Callable[[str], Path],
    media_type: str,
):
    try:
        file_path = locate(name)
    except InvalidNameError:
        logger.warning(f"Blocked disallowed track name: {name!r}")
        return render_not_found(request)

    if not file_path.is_file():
        return render_not_found(request)

    # SECURITY: a symlinked track directory must not escape the data root
    if not is_path_within_root(file_path, store.root):
        logger.warning(f"Blocked access outside data root: {file_path}")
        return render_not_found(request)

    return FileResponse(file_path, media_type=media_type)


@router.get("/tracksource/{name}")
def track_source(name: str, request: Request, store: TrackStore = Depends(get_store)):
    return _serve_track_file(request, name, store, store.audio_path, AUDIO_MEDIA_TYPE)


@router.get("/trackimage/{name}")
def track_image(name: str, request: Request, store: TrackStore = Depends(get_store)):
    return _serve_track_file(request, name, store, store.cover_path, COVER_MEDIA_TYPE)


@router.get("/main.css")
def main_css():
    return FileResponse(STATIC_DIR / "main.css", media_type="text/css")


@router.get("/img/icon.png")
def icon():
    return FileResponse(STATIC_DIR / "img" / "icon.png", media_type="image/png")
