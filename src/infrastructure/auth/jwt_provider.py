"""JWT authentication provider implementation.

Tokens are signed with the shared secret from settings. Payload structure:
    {
        "sub": "user-uuid",
        "email": "user@example.com",
        "user_metadata": {"display_name": "Display Name"},
        "iat": 1234567800,
        "exp": 1234567890
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import UUID

import structlog
from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()


class JWTAuthProvider:
    """Validates and issues HS256 access tokens."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the user.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if the signature, expiry or claims are bad
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except JWTError as exc:
            logger.debug("token_rejected", reason=str(exc))
            return None

        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or not email:
            return None

        try:
            parsed_id = UUID(user_id)
        except ValueError:
            return None

        user_metadata = payload.get("user_metadata") or {}
        return TokenUser(
            id=parsed_id,
            email=email,
            display_name=user_metadata.get("display_name"),
        )

    def create_token(self, user: TokenUser) -> str:
        """
        Create a JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }
        if user.display_name:
            payload["user_metadata"] = {"display_name": user.display_name}

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
