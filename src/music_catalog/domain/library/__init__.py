"""Library domain - track storage and the in-memory catalog.

This domain handles:
- Track data model and info.json encoding
- On-disk track directories (metadata, audio, cover)
- The shared catalog snapshot
"""

# Models
from .models import Track, track_from_dict, track_to_dict

# Storage
from .catalog import Catalog
from .store import TrackStore

# Errors
from .exceptions import (
    CatalogError,
    CatalogLoadError,
    InvalidNameError,
    InvalidTrackDataError,
    TrackNotFoundError,
)

__all__ = [
    # Models
    "Track",
    "track_from_dict",
    "track_to_dict",
    # Storage
    "Catalog",
    "TrackStore",
    # Errors
    "CatalogError",
    "CatalogLoadError",
    "InvalidNameError",
    "InvalidTrackDataError",
    "TrackNotFoundError",
]
