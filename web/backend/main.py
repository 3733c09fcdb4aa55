from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from music_catalog import __version__
from music_catalog.core.config import Config
from music_catalog.domain.library import Catalog, TrackStore
from web.backend.views import render_not_found


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Serve the generic not-found page for every 404, including unmatched routes."""
    if exc.status_code == 404:
        return render_not_found(request)
    return await http_exception_handler(request, exc)


def create_app(config: Config, catalog: Optional[Catalog] = None) -> FastAPI:
    """Build the web application around a loaded configuration.

    When no catalog is given the full catalog is loaded from the data root;
    CatalogLoadError propagates to the caller.
    """
    store = TrackStore(config.data_dir)
    if catalog is None:
        catalog = Catalog(store.load_all())

    app = FastAPI(
        title="Music Catalog",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.store = store
    app.state.catalog = catalog

    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # Include routers
    from web.backend.routers import media, pages

    app.include_router(pages.router, tags=["pages"])
    app.include_router(media.router, tags=["media"])

    logger.info(f"Serving {len(catalog)} tracks from {config.data_dir}")
    return app
