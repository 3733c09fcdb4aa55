"""
On-disk track storage.

Each track lives in its own directory under the data root, keyed by title:

    <root>/<title>/info.json
    <root>/<title>/audio/track.mp3
    <root>/<title>/image/cover.png

All filesystem mutation in the application goes through TrackStore.
"""

import io
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional

from loguru import logger

from music_catalog.core.path_security import is_allowed_name

from .exceptions import (
    CatalogLoadError,
    InvalidNameError,
    InvalidTrackDataError,
    TrackNotFoundError,
)
from .models import Track, track_from_dict, track_to_dict

INFO_FILE = "info.json"
AUDIO_FILE = Path("audio") / "track.mp3"
COVER_FILE = Path("image") / "cover.png"


def _atomic_write(target: Path, source: BinaryIO) -> None:
    """Write a stream to target via a temp file in the same directory.

    Readers see either the previous file or the complete new one.
    """
    fd, temp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as out:
            shutil.copyfileobj(source, out)
            out.flush()
            os.fsync(out.fileno())
        os.chmod(temp_path, 0o644)
        os.replace(temp_path, target)
    except Exception:
        # Clean up temp file on failure
        temp_path.unlink(missing_ok=True)
        raise


class TrackStore:
    """Reads and writes track directories under a data root."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def track_dir(self, name: str) -> Path:
        """Directory for a track name. Rejects names failing the sanitizer.

        Raises:
            InvalidNameError: If name has characters outside the allowed set
        """
        if not is_allowed_name(name):
            raise InvalidNameError(name)
        return self.root / name

    def audio_path(self, name: str) -> Path:
        return self.track_dir(name) / AUDIO_FILE

    def cover_path(self, name: str) -> Path:
        return self.track_dir(name) / COVER_FILE

    def load_one(self, name: str) -> Track:
        """Read and parse <root>/<name>/info.json.

        Raises:
            InvalidNameError: If name fails the sanitizer
            TrackNotFoundError: If the directory or info.json is missing or unreadable
            InvalidTrackDataError: If info.json does not parse into a Track
        """
        info_path = self.track_dir(name) / INFO_FILE

        try:
            raw = info_path.read_bytes()
        except OSError as e:
            raise TrackNotFoundError(name) from e

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidTrackDataError(f"Malformed {INFO_FILE} for {name!r}: {e}") from e

        return track_from_dict(data)

    def load_all(self) -> list[Track]:
        """Load every readable track under the data root, sorted by directory name.

        Entries that fail to load are skipped, so one corrupt track never
        aborts the catalog load. Entries whose directory name differs from
        their metadata title are skipped too, since they cannot be looked up.

        Raises:
            CatalogLoadError: If the data root itself cannot be listed
        """
        try:
            entries = sorted(self.root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise CatalogLoadError(f"Failed to read track data at {self.root}: {e}") from e

        tracks: list[Track] = []
        for entry in entries:
            if not entry.is_dir():
                continue
            try:
                track = self.load_one(entry.name)
            except (InvalidNameError, TrackNotFoundError, InvalidTrackDataError) as e:
                logger.warning(f"Skipping track directory {entry.name!r}: {e}")
                continue

            if track.title != entry.name:
                logger.warning(
                    f"Skipping track directory {entry.name!r}: "
                    f"title {track.title!r} does not match"
                )
                continue

            tracks.append(track)

        logger.info(f"Loaded {len(tracks)} tracks from {self.root}")
        return tracks

    def create(
        self,
        track: Track,
        audio: Optional[BinaryIO] = None,
        cover: Optional[BinaryIO] = None,
    ) -> Track:
        """Persist a track's directory tree, optional media files and info.json.

        Media files are written before info.json so the track only becomes
        loadable once its payloads are in place. Existing files for the same
        title are replaced.

        Args:
            track: Track metadata; its title names the directory
            audio: Optional MP3 stream stored as audio/track.mp3
            cover: Optional PNG stream stored as image/cover.png

        Returns:
            The stored track

        Raises:
            InvalidNameError: If the title fails the sanitizer
            OSError: If the directory tree or files cannot be written
        """
        directory = self.track_dir(track.title)
        (directory / AUDIO_FILE).parent.mkdir(parents=True, exist_ok=True)
        (directory / COVER_FILE).parent.mkdir(parents=True, exist_ok=True)

        if audio is not None:
            _atomic_write(directory / AUDIO_FILE, audio)
        if cover is not None:
            _atomic_write(directory / COVER_FILE, cover)

        payload = json.dumps(track_to_dict(track)).encode("utf-8")
        _atomic_write(directory / INFO_FILE, io.BytesIO(payload))

        logger.info(f"Stored track {track.title!r} in {directory}")
        return track
