"""Authentication and authorization of control plane users."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass
class KeychainMetadata:
    """Owners and security level of a keychain."""

    owners: list[str] = field(default_factory=list)
    level: str = ""


@dataclass(frozen=True)
class AuthorizationResult:
    """Outcome of an authorization check; apply_url says where to ask for access."""

    authorized: bool
    apply_url: Optional[str] = None


class ControlPlaneAuth(ABC):
    """Backend that identifies users and decides their access to keyrings."""

    @abstractmethod
    def authenticate_user(self, token: str) -> Optional[str]:
        """Return the username for a token, or None if unauthenticated."""

    @abstractmethod
    async def check_authorization(
        self, username: str, keyring_alias: str
    ) -> AuthorizationResult:
        """Decide whether username may use the keyring."""

    @abstractmethod
    def get_keyring_share_url(self, username: str, keyring_alias: str) -> Optional[str]:
        """A URL where access to the keyring can be shared."""

    @abstractmethod
    async def authorize_users(self, alias: str, usernames: list[str]) -> None:
        """Grant usernames access to the keychain alias."""

    @abstractmethod
    async def get_authorized_keychains(self, username: str) -> list[str]:
        """Aliases of the keychains username may use."""

    @abstractmethod
    async def create_keychain(self, alias: str, owner: str, level: str) -> None:
        """Register a new keychain."""

    @abstractmethod
    async def keychain_metadata(self, alias: str) -> KeychainMetadata:
        """Metadata of a keychain."""


class MockAuth(ControlPlaneAuth):
    """An in-memory backend for tests that authorizes a fixed set of keychains."""

    USERNAME = "test-user"
    SHARE_URL = "mock_auth"

    def __init__(self, keychain_aliases: Optional[Iterable[str]] = None) -> None:
        self._keychain_aliases = list(keychain_aliases or ())
        self._username = self.USERNAME
        self._share_url = self.SHARE_URL
        self._grants: dict[str, set[str]] = {}

    def authenticate_user(self, token: str) -> Optional[str]:
        """Every token authenticates as the same test user."""
        return self._username

    async def check_authorization(
        self, username: str, keyring_alias: str
    ) -> AuthorizationResult:
        return AuthorizationResult(keyring_alias in self._keychain_aliases)

    def get_keyring_share_url(self, username: str, keyring_alias: str) -> Optional[str]:
        """The same share URL for every keyring."""
        return self._share_url

    async def get_authorized_keychains(self, username: str) -> list[str]:
        return list(self._keychain_aliases)

    async def authorize_users(self, alias: str, usernames: list[str]) -> None:
        """Record the grant; it does not affect authorization checks."""
        self._grants.setdefault(alias, set()).update(usernames)

    async def create_keychain(self, alias: str, owner: str, level: str) -> None:
        self._keychain_aliases.append(alias)

    async def keychain_metadata(self, alias: str) -> KeychainMetadata:
        return KeychainMetadata(owners=["test"], level="L3")