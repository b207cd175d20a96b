# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from .validation.validatable import ValidationIssue


class PayloadGuardError(Exception):
    default_message: ClassVar[str] = "payloadguard error"
    status_code: ClassVar[int] = 500
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}
        self.status_code = status_code or self.status_code

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class CapabilityError(PayloadGuardError):
    """Raised when a source does not expose an async ``json()`` method."""

    default_message = "Source is not JSON capable"
    status_code = 400
    __slots__ = ()


class ExtractionError(PayloadGuardError):
    """Raised when producing JSON from a source failed."""

    default_message = "JSON extraction failed"
    status_code = 400
    __slots__ = ()


class ValidationError(PayloadGuardError):
    """Exception raised when validation fails."""

    default_message = "Validation failed"
    status_code = 422  # Unprocessable Entity
    __slots__ = ()

    @classmethod
    def from_issues(
        cls,
        issues: "Iterable[ValidationIssue]",
        *,
        message: str | None = None,
        cause: Exception | None = None,
    ):
        """Create a ValidationError whose message is the serialized issue list."""
        from .validation.validatable import dump_issues

        issues = tuple(issues)
        return cls(
            message=message or dump_issues(issues),
            details={"errors": [i.to_dict() for i in issues]},
            cause=cause,
        )


__all__ = (
    "PayloadGuardError",
    "CapabilityError",
    "ExtractionError",
    "ValidationError",
)
