"""AES-256-GCM coding for client data and stored key material."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from keyhouse.coding import ClientCoding

KEY_SIZE = 32
NONCE_LEN = 12
TAG_LEN = 16
SEED_SIZE = 16


def _check_key(raw: bytes) -> bytes:
    raw = bytes(raw)
    if len(raw) != KEY_SIZE:
        raise ValueError("invalid source length")
    return raw


def _check_iv(iv: bytes) -> bytes:
    iv = bytes(iv)
    if len(iv) != NONCE_LEN:
        raise ValueError("invalid iv length")
    return iv


@dataclass
class Aes256GcmItem(ClientCoding):
    """A 256-bit AES-GCM key with a count of encryptions made with it."""

    key: bytes = field(repr=False)
    counter: int = 0

    def __post_init__(self) -> None:
        self.key = _check_key(self.key)

    @classmethod
    def generate(cls) -> "Aes256GcmItem":
        """Create an item with a fresh random key."""
        return cls(os.urandom(KEY_SIZE))

    @classmethod
    def generate_seed(cls) -> bytes:
        """Create a random seed for generate_epoch."""
        return os.urandom(SEED_SIZE)

    @classmethod
    def generate_epoch(cls, seed: bytes, epoch: int) -> "Aes256GcmItem":
        """Derive a key with HKDF-SHA256, salted by the big-endian epoch number."""
        salt = int(epoch).to_bytes(8, "big")
        hkdf = HKDF(algorithm=hashes.SHA256(), length=KEY_SIZE, salt=salt, info=b"")
        return cls(hkdf.derive(bytes(seed)))

    @classmethod
    def from_source(cls, source: bytes) -> "Aes256GcmItem":
        """Load an item from its raw 32-byte key."""
        return cls(_check_key(source))

    def into_source(self) -> bytes:
        """Return the raw key."""
        return self.key

    def encode_self(self) -> bytes:
        """Serialise this item for storage."""
        return self.key

    @classmethod
    def decode_self(cls, raw: bytes) -> "Aes256GcmItem":
        """Load an item serialised with encode_self."""
        return cls(_check_key(raw))

    def _seal(self, data: bytes, iv: bytes) -> bytes:
        return AESGCM(self.key).encrypt(iv, bytes(data), None)

    def _open(self, data: bytes, iv: bytes) -> bytes:
        try:
            return AESGCM(self.key).decrypt(iv, bytes(data), None)
        except InvalidTag as exc:
            raise ValueError("decryption failed") from exc

    def encode_data(self, data: bytes) -> bytes:
        """Encrypt under a random nonce; the nonce is prepended to the output."""
        self.counter += 1
        iv = os.urandom(NONCE_LEN)
        return iv + self._seal(data, iv)

    def decode_data(self, data: bytes) -> bytes:
        """Decrypt data laid out as nonce, ciphertext, tag."""
        data = bytes(data)
        if len(data) < TAG_LEN + NONCE_LEN:
            raise ValueError("invalid data length")
        return self._open(data[NONCE_LEN:], data[:NONCE_LEN])

    def encode_data_with_iv(self, data: bytes, iv: bytes) -> bytes:
        """Encrypt with the given 12-byte nonce, which is not prepended."""
        self.counter += 1
        return self._seal(data, _check_iv(iv))

    def decode_data_with_iv(self, data: bytes, iv: bytes) -> bytes:
        """Decrypt ciphertext and tag made with the given 12-byte nonce."""
        return self._open(data, _check_iv(iv))