# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    CapabilityError,
    ExtractionError,
    PayloadGuardError,
    ValidationError,
)
from .config import settings
from .extraction import (
    JSONABLE,
    ExtractionFailed,
    ExtractionOutcome,
    Jsonable,
    NotJsonCapable,
    Ok,
    Outcome,
    SchemaMismatch,
    extract,
    parse,
)
from .types import Absent, AbsentType
from .validation import (
    TypeValidator,
    Validatable,
    Validation,
    ValidationIssue,
    check,
    ensure,
    validatable,
)
from .version import __version__

logger = logging.getLogger(__name__)

__all__ = (
    "__version__",
    "Absent",
    "AbsentType",
    "CapabilityError",
    "ExtractionError",
    "ExtractionFailed",
    "ExtractionOutcome",
    "JSONABLE",
    "Jsonable",
    "NotJsonCapable",
    "Ok",
    "Outcome",
    "PayloadGuardError",
    "SchemaMismatch",
    "TypeValidator",
    "Validatable",
    "Validation",
    "ValidationError",
    "ValidationIssue",
    "check",
    "ensure",
    "extract",
    "logger",
    "parse",
    "settings",
    "validatable",
)
