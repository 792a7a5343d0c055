"""Unit tests for JWTAuthProvider."""

from uuid import uuid4

import pytest
from jose import jwt as jose_jwt

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser


def _make_token(payload: dict, secret: str = "test-secret") -> str:
    return jose_jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


class TestRoundTrip:
    async def test_created_token_validates_to_same_user(self, provider: JWTAuthProvider):
        user = TokenUser(id=uuid4(), email="alice@example.com", display_name="Alice")

        result = await provider.validate_token(provider.create_token(user))

        assert result == user

    async def test_display_name_is_optional(self, provider: JWTAuthProvider):
        user = TokenUser(id=uuid4(), email="alice@example.com")

        result = await provider.validate_token(provider.create_token(user))

        assert result is not None
        assert result.display_name is None

    async def test_display_name_read_from_user_metadata(self, provider: JWTAuthProvider):
        token = _make_token(
            {
                "sub": str(uuid4()),
                "email": "bob@example.com",
                "user_metadata": {"display_name": "Bob"},
                "exp": 9999999999,
            }
        )

        result = await provider.validate_token(token)

        assert result is not None
        assert result.display_name == "Bob"


class TestRejectedTokens:
    async def test_wrong_secret(self, provider: JWTAuthProvider):
        token = _make_token(
            {"sub": str(uuid4()), "email": "a@example.com", "exp": 9999999999},
            secret="other-secret",
        )

        assert await provider.validate_token(token) is None

    async def test_expired(self, provider: JWTAuthProvider):
        token = _make_token({"sub": str(uuid4()), "email": "a@example.com", "exp": 1})

        assert await provider.validate_token(token) is None

    async def test_garbage(self, provider: JWTAuthProvider):
        assert await provider.validate_token("not.a.jwt") is None

    async def test_missing_sub(self, provider: JWTAuthProvider):
        token = _make_token({"email": "a@example.com", "exp": 9999999999})

        assert await provider.validate_token(token) is None

    async def test_missing_email(self, provider: JWTAuthProvider):
        token = _make_token({"sub": str(uuid4()), "exp": 9999999999})

        assert await provider.validate_token(token) is None

    async def test_sub_not_a_uuid(self, provider: JWTAuthProvider):
        token = _make_token({"sub": "user-42", "email": "a@example.com", "exp": 9999999999})

        assert await provider.validate_token(token) is None
