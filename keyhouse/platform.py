"""Responses and request helpers for the control plane API."""

from __future__ import annotations

import dataclasses
import json
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_ALIAS_RE = re.compile(r"[a-zA-Z0-9_.-]+")
_LOG_PATH_RE = re.compile(
    r"/api/keyrings/([a-zA-Z0-9_.-]+)"
    r"(?:/customer_key/([a-zA-Z0-9_.-]+))?"
    r"(?:/secret/([a-zA-Z0-9_.-]+))?"
)
_BEARER_PREFIX = "Bearer "


@dataclass
class PlatformResponse(Generic[T]):
    """Envelope of every control plane response.

    error_code is 0 for success, 1 for a generic error (see message),
    2 for unauthenticated and 3 for unauthorized.
    """

    error_code: int
    message: Optional[str] = None
    apply_url: Optional[str] = None
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T) -> "PlatformResponse[T]":
        """A successful response carrying data."""
        return cls(error_code=0, data=data)

    @classmethod
    def error(cls, message: str) -> "PlatformResponse[T]":
        """A generic error response."""
        return cls(error_code=1, message=str(message))

    @classmethod
    def auth_error(
        cls, message: str, error_code: int, apply_url: Optional[str] = None
    ) -> "PlatformResponse[T]":
        """An authentication or authorization error response."""
        return cls(error_code=error_code, message=str(message), apply_url=apply_url)

    def to_dict(self) -> dict[str, Any]:
        """Return the response as a plain dictionary, fields in wire order."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "apply_url": self.apply_url,
            "data": _plain(self.data),
        }

    def to_json(self) -> str:
        """Serialise the response as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"))


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


class PlatformError(Exception):
    """Raised when a request fails; carries the response to send back."""

    def __init__(self, response: PlatformResponse) -> None:
        super().__init__(response.message or f"error code {response.error_code}")
        self.response = response


def verify_alias(alias: str) -> None:
    """Check that an alias holds only letters, digits, '_', '.' and '-'."""
    if _ALIAS_RE.fullmatch(alias) is None:
        raise PlatformError(PlatformResponse.error("invalid alias"))


def info_message(username: str) -> str:
    """The JSON greeting returned by the info endpoint."""
    return PlatformResponse(error_code=0, message=f"hello {username}").to_json()


def parse_log_path(path: str) -> tuple[Optional[str], Optional[str], Optional[str]]:
    """Extract keyring, customer key and secret aliases from a request path."""
    match = _LOG_PATH_RE.search(path)
    if match is None:
        return None, None, None
    keyring, key, secret = match.groups()
    return keyring, key, secret


def strip_bearer(token: str) -> str:
    """Remove a leading 'Bearer ' from an authorization token."""
    if token.startswith(_BEARER_PREFIX):
        return token[len(_BEARER_PREFIX):]
    return token