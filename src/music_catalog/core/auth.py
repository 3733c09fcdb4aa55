"""
Admin credential check for HTTP Basic Authentication.
"""

import hashlib
import hmac
from typing import Optional

from music_catalog.core.config import Config


def _digest(value: str) -> bytes:
    return hashlib.sha256(value.encode("utf-8")).digest()


def constant_time_equals(supplied: str, expected: str) -> bool:
    """Compare two strings without leaking prefix matches or lengths.

    Both sides are hashed first so compare_digest always sees equal-length
    inputs.
    """
    return hmac.compare_digest(_digest(supplied), _digest(expected))


def check_credentials(
    username: Optional[str],
    password: Optional[str],
    basic_auth_present: bool,
    config: Config,
) -> bool:
    """Pure function - returns True only if both fields match the configured admin.

    Both comparisons always run; a mismatch in either field is a rejection.
    No state is kept between calls.
    """
    if not basic_auth_present:
        return False

    username_ok = constant_time_equals(username or "", config.admin_username)
    password_ok = constant_time_equals(password or "", config.admin_password)
    return username_ok & password_ok
