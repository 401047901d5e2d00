"""Information about the system the kernel runs on."""

from __future__ import annotations

import os

try:
    import pwd
except ImportError:  # pragma: no cover - platforms without a password database
    pwd = None

UNSPECIFIED_USER = "unspecified user"


def get_user_name() -> str:
    """Return the name of the user running the kernel.

    The password database entry of the effective user is preferred; the
    environment is consulted when it is unavailable, and ``"unspecified user"``
    is returned when nothing names the user.
    """
    if pwd is not None:
        try:
            return pwd.getpwuid(os.geteuid()).pw_name
        except (KeyError, OSError):
            return os.environ.get("USER") or UNSPECIFIED_USER
    return os.environ.get("USERNAME") or os.environ.get("USER") or UNSPECIFIED_USER