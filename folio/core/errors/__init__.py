"""Core errors package.

Usage:
    from folio.core.errors import DomainError, ValidationError, NotFoundError
"""

from folio.core.errors.common_errors import NotFoundError, ValidationError
from folio.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
]
