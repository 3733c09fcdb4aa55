"""Jinja2 rendering helpers shared by the page routers."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

BACKEND_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BACKEND_DIR / "templates"
STATIC_DIR = BACKEND_DIR / "static"

TEMPLATES = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_release_date(epoch_seconds: int) -> str:
    """Pure function - render a Unix timestamp as a UTC calendar date."""
    try:
        return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).strftime("%Y-%m-%d")
    except (OverflowError, OSError, ValueError):
        return str(epoch_seconds)


TEMPLATES.env.filters["release_date"] = format_release_date


def render(
    request: Request,
    template: str,
    page: Optional[BaseModel] = None,
    status_code: int = 200,
):
    """Render a template with its view model exposed as ``page``."""
    return TEMPLATES.TemplateResponse(
        request,
        template,
        {"page": page},
        status_code=status_code,
    )


def render_not_found(request: Request):
    """Generic not-found page. Never mentions what was looked up or why it failed."""
    return render(request, "404.html", status_code=404)
