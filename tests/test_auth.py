import pytest

from keyhouse.auth import AuthorizationResult, KeychainMetadata, MockAuth


def test_authenticate_user_always_succeeds():
    auth = MockAuth()
    assert auth.authenticate_user("token") == "test-user"


def test_share_url():
    assert MockAuth().get_keyring_share_url("someone", "ring") == "mock_auth"


@pytest.mark.asyncio
async def test_check_authorization_known_keyring():
    auth = MockAuth(["test"])
    result = await auth.check_authorization("someone", "test")
    assert result == AuthorizationResult(True)


@pytest.mark.asyncio
async def test_check_authorization_unknown_keyring():
    auth = MockAuth(["test"])
    result = await auth.check_authorization("someone", "other")
    assert result.authorized is False
    assert result.apply_url is None


@pytest.mark.asyncio
async def test_create_keychain_grants_access():
    auth = MockAuth()
    assert (await auth.check_authorization("u", "ring")).authorized is False
    await auth.create_keychain("ring", "u", "L3")
    assert (await auth.check_authorization("u", "ring")).authorized is True
    assert await auth.get_authorized_keychains("u") == ["ring"]


@pytest.mark.asyncio
async def test_authorized_keychains_is_a_copy():
    auth = MockAuth(["a", "b"])
    listed = await auth.get_authorized_keychains("u")
    listed.append("c")
    assert await auth.get_authorized_keychains("u") == ["a", "b"]


@pytest.mark.asyncio
async def test_authorize_users_leaves_keychains_unchanged():
    auth = MockAuth(["a"])
    await auth.authorize_users("b", ["someone"])
    assert await auth.get_authorized_keychains("u") == ["a"]


@pytest.mark.asyncio
async def test_keychain_metadata():
    meta = await MockAuth().keychain_metadata("ring")
    assert meta == KeychainMetadata(owners=["test"], level="L3")