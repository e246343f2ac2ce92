"""Error codes carried in responses of the key service."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Result code of a key service operation."""

    OK = 0
    UNAUTHORIZED = 1
    UNKNOWN_ALIAS = 2
    UNKNOWN_KEY = 3
    BAD_PAYLOAD = 4
    FORBIDDEN = 5
    UNKNOWN = 255

    @classmethod
    def from_primitive(cls, primitive: int) -> "ErrorCode":
        """Map a raw numeric code to an ErrorCode; unrecognised values become UNKNOWN."""
        try:
            return cls(primitive)
        except ValueError:
            return cls.UNKNOWN

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    ErrorCode.OK: "Ok",
    ErrorCode.UNAUTHORIZED: "Unauthorized",
    ErrorCode.UNKNOWN_ALIAS: "UnknownAlias",
    ErrorCode.UNKNOWN_KEY: "UnknownKey",
    ErrorCode.BAD_PAYLOAD: "BadPayload",
    ErrorCode.FORBIDDEN: "Forbidden",
    ErrorCode.UNKNOWN: "Unknown",
}