"""Pytest configuration for backend tests.

Each test gets a fresh data root and an app built around it.
"""

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add repository root to path so `web.backend` imports resolve
repo_root = Path(__file__).parent.parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from music_catalog.core.config import Config  # noqa: E402
from web.backend.main import create_app  # noqa: E402

ADMIN = ("a", "b")


def write_track(root: Path, title: str, description: str = "", release_date: int = 0) -> Path:
    """Create a track directory the way TrackStore lays it out."""
    track_dir = root / title
    (track_dir / "audio").mkdir(parents=True)
    (track_dir / "image").mkdir(parents=True)
    (track_dir / "info.json").write_text(
        json.dumps(
            {"title": title, "description": description, "release-date": release_date}
        )
    )
    return track_dir


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture
def config(data_root: Path) -> Config:
    return Config(
        port=8080,
        admin_username=ADMIN[0],
        admin_password=ADMIN[1],
        data_dir=data_root,
    )


@pytest.fixture
def app(config: Config):
    return create_app(config)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_track(data_root: Path):
    """Factory writing track directories into the test data root."""

    def _make(title: str, description: str = "", release_date: int = 0) -> Path:
        return write_track(data_root, title, description, release_date)

    return _make


@pytest.fixture
def admin_auth() -> tuple[str, str]:
    return ADMIN
