"""JWT token service (adapter).

Implements TokenGenerationProtocol with PyJWT and HMAC-SHA256. The API
only validates tokens; generate_access_token() serves tooling, seed
scripts and tests that need a token for a demo account.

Security:
    - HS256 with a 256-bit minimum secret
    - 'sub' carries the account UUID
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from folio.core.result import Failure, Result, Success

INVALID_TOKEN = "Invalid or expired access token"
MISSING_SUBJECT = "Access token has no valid subject"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from folio.core.container import get_token_service

        token_service = get_token_service()
        result = token_service.validate_access_token(token)
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 30) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (>= 32 bytes).
            expiration_minutes: Token lifetime in minutes.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    def generate_access_token(self, account_id: UUID) -> str:
        """Generate JWT access token for an account.

        Args:
            account_id: Account identifier ('sub' claim).

        Returns:
            JWT access token string.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(account_id=uuid7())
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(account_id),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int], str]:
        """Validate JWT access token and extract payload.

        Signature and expiration are checked by PyJWT; the 'sub' claim
        must additionally parse as a UUID.

        Args:
            token: JWT access token string.

        Returns:
            Success(payload) if valid, Failure(error message) otherwise.
        """
        try:
            payload: dict[str, str | int] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except InvalidTokenError:
            return Failure(error=INVALID_TOKEN)

        try:
            UUID(str(payload["sub"]))
        except ValueError:
            return Failure(error=MISSING_SUBJECT)

        return Success(value=payload)
