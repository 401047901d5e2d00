"""String helpers shared by the kernel components."""

from __future__ import annotations

from collections.abc import Iterable


def hex_string(data: bytes | bytearray | memoryview | Iterable[int]) -> str:
    """Return the lower-case, zero-padded hexadecimal form of a byte sequence."""
    return bytes(data).hex()