"""
HTML page endpoints: home, track detail, login and the admin "add track" flow.
"""

from typing import BinaryIO, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile

from music_catalog.domain.library import (
    Catalog,
    InvalidNameError,
    InvalidTrackDataError,
    Track,
    TrackNotFoundError,
    TrackStore,
)
from ..deps import get_catalog, get_is_admin, get_store, require_admin
from ..schemas import HomePage, TrackNewPage, TrackPage, TrackView
from ..views import render, render_not_found

router = APIRouter()


def _form_text(form: FormData, key: str, default: Optional[str] = None) -> str:
    """Text value of a form field; 422 when it is missing or a file."""
    value = form.get(key, default)
    if not isinstance(value, str):
        raise HTTPException(status_code=422, detail=f"Missing form field: {key}")
    return value


def _upload_stream(upload) -> Optional[BinaryIO]:
    """Pure function - file stream of an upload, None when no file was chosen."""
    # Browsers submit an empty part with no filename for an untouched file input
    if not isinstance(upload, UploadFile) or not upload.filename:
        return None
    return upload.file


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    is_admin: bool = Depends(get_is_admin),
    catalog: Catalog = Depends(get_catalog),
):
    page = HomePage(
        tracks=[TrackView.from_track(t) for t in catalog.snapshot()],
        is_admin=is_admin,
    )
    return render(request, "index.html", page)


@router.get("/track/{name}", response_class=HTMLResponse)
def track_detail(
    name: str,
    request: Request,
    is_admin: bool = Depends(get_is_admin),
    store: TrackStore = Depends(get_store),
):
    try:
        track = store.load_one(name)
    except InvalidNameError:
        logger.warning(f"Blocked disallowed track name: {name!r}")
        return render_not_found(request)
    except (TrackNotFoundError, InvalidTrackDataError) as e:
        logger.debug(f"Track lookup failed: {e}")
        return render_not_found(request)

    # Only reachable when the directory name and the stored title agree
    if track.title != name:
        logger.debug(f"Track {name!r} stores mismatched title {track.title!r}")
        return render_not_found(request)

    page = TrackPage(track=TrackView.from_track(track), is_admin=is_admin)
    return render(request, "track.html", page)


@router.api_route("/login", methods=["GET", "POST"], dependencies=[Depends(require_admin)])
def login():
    """Trigger the browser's credential prompt; nothing is stored server-side."""
    return RedirectResponse("/", status_code=303)


@router.get("/tracknew", response_class=HTMLResponse)
def new_track_form(request: Request, is_admin: bool = Depends(require_admin)):
    return render(request, "tracknew.html", TrackNewPage(is_admin=is_admin))


@router.post("/tracknew")
async def create_track(
    request: Request,
    is_admin: bool = Depends(require_admin),
    store: TrackStore = Depends(get_store),
    catalog: Catalog = Depends(get_catalog),
):
    # No body parameters on this route: the form is only read once the
    # credentials have been accepted.
    async with request.form() as form:
        title = _form_text(form, "title")
        description = _form_text(form, "description", default="")
        release_date_raw = _form_text(form, "release_date")
        try:
            release_date = int(release_date_raw)
        except ValueError:
            raise HTTPException(
                status_code=422, detail="release_date must be an integer"
            ) from None

        track = Track(title=title, description=description, release_date=release_date)
        audio = _upload_stream(form.get("audio"))
        cover = _upload_stream(form.get("cover"))

        try:
            await run_in_threadpool(store.create, track, audio=audio, cover=cover)
        except InvalidNameError:
            logger.warning(f"Rejected new track with disallowed title: {title!r}")
            return render_not_found(request)
        except OSError as e:
            logger.exception(f"Failed to store track {title!r}")
            raise HTTPException(status_code=500, detail="Failed to store track") from e

    catalog.publish(track)
    logger.info(f"Track {title!r} added to catalog ({len(catalog)} tracks)")
    return RedirectResponse(f"/track/{quote(title)}", status_code=303)
