# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tagged results of a JSON extraction.

``extract`` returns exactly one of ``Ok``, ``NotJsonCapable``,
``ExtractionFailed`` or ``SchemaMismatch`` so callers can tell "no body at
all" apart from "wrong shape" and decide how much detail to surface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar, Union

from .._errors import (
    CapabilityError,
    ExtractionError,
    PayloadGuardError,
    ValidationError,
)
from ..types import Absent, AbsentType
from ..validation.validatable import ValidationIssue, dump_issues

__all__ = (
    "ExtractionFailed",
    "ExtractionOutcome",
    "NotJsonCapable",
    "Ok",
    "Outcome",
    "SchemaMismatch",
)

T = TypeVar("T")


class ExtractionOutcome:
    """Common surface of every outcome."""

    __slots__ = ()
    ok: ClassVar[bool] = False

    @property
    def value(self) -> Any | AbsentType:
        return Absent

    @property
    def detail(self) -> str:
        return ""

    def to_error(self) -> PayloadGuardError | None:
        return None

    def unwrap(self) -> Any:
        """Return the extracted value or raise the matching error."""
        raise self.to_error()


@dataclass(frozen=True, slots=True)
class Ok(ExtractionOutcome, Generic[T]):
    data: T
    ok: ClassVar[bool] = True

    @property
    def value(self) -> T:
        return self.data

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True, slots=True)
class NotJsonCapable(ExtractionOutcome):
    """The source exposes no zero-argument ``json()`` method."""

    errors: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def detail(self) -> str:
        return dump_issues(self.errors)

    def to_error(self) -> CapabilityError:
        return CapabilityError(
            details={"errors": [i.to_dict() for i in self.errors]}
        )


@dataclass(frozen=True, slots=True)
class ExtractionFailed(ExtractionOutcome):
    """Calling or awaiting ``json()`` failed."""

    error: Exception

    @property
    def detail(self) -> str:
        return str(self.error)

    def to_error(self) -> ExtractionError:
        return ExtractionError(
            f"JSON extraction failed: {self.error}", cause=self.error
        )


@dataclass(frozen=True, slots=True)
class SchemaMismatch(ExtractionOutcome):
    """The produced JSON does not match the target schema."""

    errors: tuple[ValidationIssue, ...]

    @property
    def detail(self) -> str:
        return dump_issues(self.errors)

    def to_error(self) -> ValidationError:
        return ValidationError.from_issues(self.errors)


Outcome = Union[Ok[T], NotJsonCapable, ExtractionFailed, SchemaMismatch]
