# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import inspect
import logging
from typing import Any, TypeVar

from ..config import settings
from ..types import MaybeAbsent
from ..validation.check import check
from ..validation.validatable import Validatable
from .capability import JSONABLE
from .outcome import (
    ExtractionFailed,
    NotJsonCapable,
    Ok,
    Outcome,
    SchemaMismatch,
)

__all__ = ("extract", "parse")

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def extract(source: Any, schema: Validatable[T]) -> Outcome[T]:
    """Extract JSON from ``source`` and validate it against ``schema``.

    Never raises for bad input and never logs; every failure is returned as
    a tagged outcome. Cancellation of the awaiting task still propagates.

    Args:
        source: An object with a ``json()`` coroutine method that **has not**
            been consumed yet, typically a request. Anything else, including
            an object whose ``json()`` is synchronous, yields
            ``NotJsonCapable`` without touching the object.
        schema: The descriptor for the expected payload type.

    Returns:
        Outcome[T]: ``Ok``, ``NotJsonCapable``, ``ExtractionFailed`` or
            ``SchemaMismatch``.
    """
    capability = check(source, JSONABLE)
    if not capability.success:
        return NotJsonCapable(capability.errors)

    try:
        pending = source.json()
    except Exception as e:
        return ExtractionFailed(e)

    if not inspect.isawaitable(pending):
        return ExtractionFailed(
            TypeError(
                f"{type(source).__name__}.json() returned "
                f"{type(pending).__name__}, expected an awaitable"
            )
        )

    try:
        data = await pending
    except Exception as e:
        return ExtractionFailed(e)

    result = check(data, schema)
    if not result.success:
        return SchemaMismatch(result.errors)
    return Ok(result.data)


async def parse(source: Any, schema: Validatable[T]) -> MaybeAbsent[T]:
    """Extract and validate JSON, resolving to ``Absent`` on any failure.

    Example:
        >>> data = await parse(request, Foo)
        >>> if data is Absent:
        ...     return error  # request body is not a Foo
        >>> data["bar"]  # data is typed as Foo here

    A source that is not JSON capable resolves to ``Absent`` silently.
    Extraction failures and schema mismatches are logged as one warning.
    """
    outcome = await extract(source, schema)
    if isinstance(outcome, (ExtractionFailed, SchemaMismatch)):
        logger.warning(f"{settings.PAYLOADGUARD_LOG_PREFIX} {outcome.detail}")
    return outcome.value
