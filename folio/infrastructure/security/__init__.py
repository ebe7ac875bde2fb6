"""Security adapters."""

from folio.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
