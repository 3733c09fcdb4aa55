from pydantic import BaseModel

from music_catalog.domain.library import Track


class TrackView(BaseModel):
    title: str
    description: str
    release_date: int  # Unix epoch seconds

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_track(cls, track: Track) -> "TrackView":
        return cls(
            title=track.title,
            description=track.description,
            release_date=track.release_date,
        )


class HomePage(BaseModel):
    tracks: list[TrackView]
    is_admin: bool


class TrackPage(BaseModel):
    track: TrackView
    is_admin: bool


class TrackNewPage(BaseModel):
    is_admin: bool
