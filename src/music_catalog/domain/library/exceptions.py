"""Track storage exceptions for error handling."""


class CatalogError(Exception):
    """Base exception for track storage operations."""

    pass


class InvalidNameError(CatalogError):
    """Raised when a track name contains characters outside the allowed set."""

    def __init__(self, name: str, message: str = None):
        self.name = name
        super().__init__(message or f"Disallowed track name: {name!r}")


class TrackNotFoundError(CatalogError):
    """Raised when a track directory or its info.json does not exist."""

    def __init__(self, name: str, message: str = None):
        self.name = name
        super().__init__(message or f"Track not found: {name!r}")


class InvalidTrackDataError(CatalogError):
    """Raised when stored track metadata cannot be parsed into a Track."""

    pass


class CatalogLoadError(CatalogError):
    """Raised when the data root itself cannot be enumerated."""

    pass
