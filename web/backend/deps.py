from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic

from music_catalog.core.auth import check_credentials
from music_catalog.core.config import Config
from music_catalog.domain.library import Catalog, TrackStore

AUTH_REALM = "Access"
AUTH_CHALLENGE = {"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'}

basic_auth = HTTPBasic(realm=AUTH_REALM, auto_error=False)


def get_config(request: Request) -> Config:
    """FastAPI dependency for configuration."""
    return request.app.state.config


def get_store(request: Request) -> TrackStore:
    """FastAPI dependency for the on-disk track store."""
    return request.app.state.store


def get_catalog(request: Request) -> Catalog:
    """FastAPI dependency for the in-memory catalog snapshot."""
    return request.app.state.catalog


async def get_is_admin(request: Request, config: Config = Depends(get_config)) -> bool:
    """Admin capability for this request, re-checked on every request.

    A missing or malformed Authorization header is treated as anonymous.
    """
    try:
        credentials = await basic_auth(request)
    except HTTPException:
        credentials = None

    if credentials is None:
        return check_credentials(None, None, False, config)
    return check_credentials(credentials.username, credentials.password, True, config)


def require_admin(is_admin: bool = Depends(get_is_admin)) -> bool:
    """Reject non-admin requests with a Basic challenge."""
    if not is_admin:
        raise HTTPException(status_code=401, detail="Unauthorized", headers=AUTH_CHALLENGE)
    return is_admin
