"""JWT authentication dependencies.

Extracts the bearer token, validates it and exposes the calling account.
The token's 'sub' claim is the account UUID.

Usage:
    @router.get("/portfolio")
    async def get_portfolio(current_user: AuthenticatedUser):
        return {"account_id": str(current_user.account_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from folio.core.container import get_token_service
from folio.core.result import Failure, Success
from folio.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# auto_error=False so a missing header goes through our 401 path
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller extracted from the JWT.

    Attributes:
        account_id: Account identifier ('sub' claim).
    """

    account_id: UUID


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated account from the JWT.

    Raises:
        HTTPException 401: Token missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Missing bearer token")

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            return CurrentUser(account_id=UUID(str(payload["sub"])))
        case Failure(error=error):
            raise _unauthorized(error)

    raise _unauthorized("Invalid token")


# Type alias for cleaner route signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
