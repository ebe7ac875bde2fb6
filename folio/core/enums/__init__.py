"""Core enums package.

Usage:
    from folio.core.enums import ErrorCode, Environment
"""

from folio.core.enums.environment import Environment
from folio.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
