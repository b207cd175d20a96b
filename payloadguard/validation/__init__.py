"""
Runtime validation of already-parsed data.
"""

from .check import check, ensure
from .validatable import (
    TypeValidator,
    Validatable,
    Validation,
    ValidationIssue,
    validatable,
)

__all__ = (
    "TypeValidator",
    "Validatable",
    "Validation",
    "ValidationIssue",
    "check",
    "ensure",
    "validatable",
)
