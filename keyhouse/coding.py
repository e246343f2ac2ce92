"""Client-side data codings and region identifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

_DATA_FOR_EMPTY = bytes([0, 9, 8, 7, 6, 5, 4, 3] * 4)


@dataclass(frozen=True)
class Region:
    """An opaque region identifier."""

    name: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", bytes(self.name))


class ClientCoding(ABC):
    """A symmetric coding that a client uses to protect data."""

    @classmethod
    @abstractmethod
    def generate(cls) -> "ClientCoding":
        """Create a fresh coding."""

    @classmethod
    @abstractmethod
    def generate_seed(cls) -> bytes:
        """Create a seed for generate_epoch."""

    @classmethod
    @abstractmethod
    def generate_epoch(cls, seed: bytes, epoch: int) -> "ClientCoding":
        """Derive a coding from a seed and an epoch number."""

    @classmethod
    @abstractmethod
    def from_source(cls, source: bytes) -> "ClientCoding":
        """Load a coding from its serialised form."""

    @abstractmethod
    def into_source(self) -> bytes:
        """Serialise this coding."""

    @abstractmethod
    def encode_data(self, data: bytes) -> bytes:
        """Encode data."""

    @abstractmethod
    def decode_data(self, data: bytes) -> bytes:
        """Decode data produced by encode_data."""

    @abstractmethod
    def encode_data_with_iv(self, data: bytes, iv: bytes) -> bytes:
        """Encode data with an explicit IV; the IV is not prepended to the output."""

    @abstractmethod
    def decode_data_with_iv(self, data: bytes, iv: bytes) -> bytes:
        """Decode data produced by encode_data_with_iv."""


@dataclass(frozen=True)
class NullCoding(ClientCoding):
    """A trivial, insecure coding used for testing."""

    @classmethod
    def generate(cls) -> "NullCoding":
        return cls()

    @classmethod
    def generate_seed(cls) -> bytes:
        return _DATA_FOR_EMPTY

    @classmethod
    def generate_epoch(cls, seed: bytes, epoch: int) -> "NullCoding":
        return cls()

    @classmethod
    def from_source(cls, source: bytes) -> "NullCoding":
        if bytes(source) != _DATA_FOR_EMPTY:
            raise ValueError("invalid source for null coding")
        return cls()

    def into_source(self) -> bytes:
        return _DATA_FOR_EMPTY

    def encode_data(self, data: bytes) -> bytes:
        return self.encode_data_with_iv(data, b"")

    def decode_data(self, data: bytes) -> bytes:
        return self.decode_data_with_iv(data, b"")

    def encode_data_with_iv(self, data: bytes, iv: bytes) -> bytes:
        buf = bytearray(data)
        if buf:
            buf[0] = (buf[0] + 1) % 256
        buf.reverse()
        return bytes(buf)

    def decode_data_with_iv(self, data: bytes, iv: bytes) -> bytes:
        buf = bytearray(data)
        buf.reverse()
        if buf:
            buf[0] = (buf[0] - 1) % 256
        return bytes(buf)