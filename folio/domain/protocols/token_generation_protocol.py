"""Token generation protocol for domain layer.

Interface for JWT access tokens identifying the calling account.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
    - Stateless validation (no database lookup)
"""

from typing import Protocol
from uuid import UUID

from folio.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        result = token_service.validate_access_token(token)
        match result:
            case Success(value=payload):
                account_id = UUID(payload["sub"])
            case Failure(error=error):
                # Invalid or expired token
                ...
    """

    def generate_access_token(self, account_id: UUID) -> str:
        """Generate JWT access token.

        Args:
            account_id: Account identifier (stored in 'sub' claim).

        Returns:
            JWT access token string.
        """
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int], str]:
        """Validate JWT access token and extract payload.

        Args:
            token: JWT access token string to validate.

        Returns:
            Success(payload) if signature and expiry are valid,
            Failure(error message) otherwise. Never raises.
        """
        ...
