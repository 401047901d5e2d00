"""Message signing and verification for the kernel wire protocol."""

from __future__ import annotations

import hashlib
import hmac
from abc import ABC, abstractmethod

from kernelkit.strings import hex_string

Buffer = bytes | bytearray | memoryview | str

_SCHEMES = {
    "hmac-md5": "md5",
    "hmac-sha1": "sha1",
    "hmac-ripemd160": "ripemd160",
    "hmac-blake2b512": "blake2b",
    "hmac-blake2s256": "blake2s",
    "hmac-sha224": "sha224",
    "hmac-sha256": "sha256",
    "hmac-sha384": "sha384",
    "hmac-sha512": "sha512",
}


def _to_bytes(buffer: Buffer) -> bytes:
    if isinstance(buffer, str):
        return buffer.encode("utf-8")
    return bytes(buffer)


class Authentication(ABC):
    """Signs and verifies the four frames of a message."""

    @abstractmethod
    def sign(self, header: Buffer, parent_header: Buffer, metadata: Buffer, content: Buffer) -> str:
        """Return the signature of a message as a hexadecimal string."""

    @abstractmethod
    def verify(
        self,
        signature: Buffer,
        header: Buffer,
        parent_header: Buffer,
        metadata: Buffer,
        content: Buffer,
    ) -> bool:
        """Return whether ``signature`` matches the message."""


class HmacAuthentication(Authentication):
    """HMAC signing with one of the supported digest schemes."""

    def __init__(self, scheme: str, key: Buffer) -> None:
        try:
            digest = _SCHEMES[scheme]
        except KeyError:
            raise ValueError(f"unsupported signature scheme: {scheme!r}") from None
        try:
            hashlib.new(digest)
        except ValueError as exc:
            raise ValueError(f"signature scheme not available: {scheme!r}") from exc
        self.scheme = scheme
        self._digest = digest
        self._key = _to_bytes(key)

    def _hex_digest(self, *parts: Buffer) -> str:
        mac = hmac.new(self._key, digestmod=self._digest)
        for part in parts:
            mac.update(_to_bytes(part))
        return hex_string(mac.digest())

    def sign(self, header, parent_header, metadata, content):
        return self._hex_digest(header, parent_header, metadata, content)

    def verify(self, signature, header, parent_header, metadata, content):
        expected = self._hex_digest(header, parent_header, metadata, content).encode("ascii")
        return hmac.compare_digest(expected, _to_bytes(signature)[: len(expected)])


class NoAuthentication(Authentication):
    """Signs nothing and accepts every message."""

    def sign(self, header, parent_header, metadata, content):
        return ""

    def verify(self, signature, header, parent_header, metadata, content):
        return True


def make_authentication(scheme: str, key: Buffer) -> Authentication:
    """Build the authentication for ``scheme``; ``"none"`` disables signing."""
    if scheme == "none":
        return NoAuthentication()
    return HmacAuthentication(scheme, key)