"""Generation of unique identifiers for kernels, sessions and comms."""

from __future__ import annotations

import uuid

from kernelkit.strings import hex_string


def new_guid() -> str:
    """Return a fresh random identifier as 32 lower-case hexadecimal digits."""
    return hex_string(uuid.uuid4().bytes)