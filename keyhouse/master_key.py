"""Master key providers that wrap and unwrap key material."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MasterKeyProvider(ABC):
    """Encodes and decodes data under a named master key."""

    @abstractmethod
    async def encode(self, key_id: str, data: bytes) -> bytes:
        """Encode data under the master key key_id."""

    @abstractmethod
    async def decode(self, key_id: str, data: bytes) -> bytes:
        """Decode data previously encoded under key_id."""


class MockMasterKey(MasterKeyProvider):
    """An insecure provider for tests: reverses the data and shifts one byte."""

    async def encode(self, key_id: str, data: bytes) -> bytes:
        buf = bytearray(data)
        if not buf:
            return bytes(buf)
        buf.reverse()
        # shift so that encode differs from decode
        buf[0] = (buf[0] + 1) % 256
        return bytes(buf)

    async def decode(self, key_id: str, data: bytes) -> bytes:
        buf = bytearray(data)
        if not buf:
            return bytes(buf)
        buf[0] = (buf[0] - 1) % 256
        buf.reverse()
        return bytes(buf)