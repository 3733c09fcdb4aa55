"""Tests for the Track model and its info.json encoding."""

import pytest

from music_catalog.domain.library import InvalidTrackDataError, Track, track_from_dict, track_to_dict


def test_track_to_dict_uses_stored_keys():
    assert track_to_dict(Track("Song", "desc", 1700000000)) == {
        "title": "Song",
        "description": "desc",
        "release-date": 1700000000,
    }


def test_track_from_dict_ignores_extra_keys():
    data = {"title": "Song", "description": "", "release-date": 5, "genre": "ambient"}

    assert track_from_dict(data) == Track("Song", "", 5)


def test_negative_release_date_allowed():
    """Test pre-1970 release dates are valid epoch seconds."""
    assert track_from_dict({"title": "Old", "description": "", "release-date": -86400}).release_date == -86400


@pytest.mark.parametrize(
    "data",
    [
        None,
        "Song",
        {"description": "", "release-date": 1},
        {"title": "Song", "description": None, "release-date": 1},
        {"title": "Song", "description": "", "release-date": 1.5},
        {"title": "Song", "description": "", "release_date": 1},
    ],
)
def test_track_from_dict_rejects_bad_shapes(data):
    with pytest.raises(InvalidTrackDataError):
        track_from_dict(data)
