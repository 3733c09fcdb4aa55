"""Music Catalog - self-hosted catalog site for audio tracks."""

__version__ = "0.1.0"
