"""
Music library domain models.

Contains the Track value type and its info.json encoding.
"""

from typing import Any, NamedTuple

from .exceptions import InvalidTrackDataError


class Track(NamedTuple):
    """Represents one catalog entry.

    The title doubles as the track's directory name under the data root,
    so it must be unique across the catalog.
    """
    title: str
    description: str
    release_date: int  # Unix epoch seconds


def track_to_dict(track: Track) -> dict[str, Any]:
    """Pure function - info.json representation of a track."""
    return {
        "title": track.title,
        "description": track.description,
        "release-date": track.release_date,
    }


def track_from_dict(data: Any) -> Track:
    """Pure function - parse a decoded info.json document.

    Raises:
        InvalidTrackDataError: If the document does not have the Track shape
    """
    if not isinstance(data, dict):
        raise InvalidTrackDataError("Track info must be a JSON object")

    title = data.get("title")
    description = data.get("description")
    release_date = data.get("release-date")

    if not isinstance(title, str):
        raise InvalidTrackDataError("Track info 'title' must be a string")
    if not isinstance(description, str):
        raise InvalidTrackDataError("Track info 'description' must be a string")
    # bool is a subclass of int
    if not isinstance(release_date, int) or isinstance(release_date, bool):
        raise InvalidTrackDataError("Track info 'release-date' must be an integer")

    return Track(title=title, description=description, release_date=release_date)
