"""
Path security validation utilities for Music Catalog.

Provides pure functions that decide whether a user-supplied track name may be
used as a filesystem path segment, and whether a resolved path stays inside
the data root (blocking symlink escapes).
"""

from pathlib import Path

ALLOWED_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789_-()!?,. &")


def is_allowed_name(name: str) -> bool:
    """Pure function - validates a track name against the allowed character set.

    Matching is case-insensitive. Anything outside the set (path separators,
    null bytes, non-ASCII letters) is rejected. The empty string and the
    dot-only names "." and ".." are rejected as well since they never name a
    track directory.

    Args:
        name: Untrusted name taken from a URL or form

    Returns:
        True if the name is safe to join onto the data root
    """
    if not name or name in (".", ".."):
        return False
    # isascii() first: some non-ASCII letters lower() into the set (KELVIN SIGN -> "k")
    return all(c.isascii() and c.lower() in ALLOWED_NAME_CHARS for c in name)


def is_path_within_root(file_path: Path, root: Path) -> bool:
    """Pure function - validates that a path resolves to a location under root.

    Uses Path.resolve() to follow symlinks, then checks that the resolved path
    is a child of the resolved root.

    Args:
        file_path: The path to validate
        root: Data root directory

    Returns:
        True if the path is within root, False otherwise
    """
    try:
        resolved_path = file_path.resolve()
        resolved_root = root.resolve()
        # relative_to raises ValueError if path is not a subpath
        resolved_path.relative_to(resolved_root)
        return True
    except ValueError:
        return False
    except (OSError, RuntimeError):
        # Path.resolve() can raise OSError for invalid paths or RuntimeError for recursion
        return False
