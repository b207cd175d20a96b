# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Runtime-checkable protocol for objects that can produce JSON asynchronously.

Typed code should require ``Jsonable`` statically. ``JSONABLE`` is the
structural check used where untyped objects enter, such as a raw request.
"""

from __future__ import annotations

import inspect
from typing import Any, Protocol, runtime_checkable

from ..validation.validatable import Validatable, Validation, ValidationIssue

__all__ = ("JSONABLE", "Jsonable")

_EXPECTED = "async () -> Any"
_REQUIRED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


@runtime_checkable
class Jsonable(Protocol):
    """Exposes ``json()``, a zero-argument coroutine producing parsed JSON."""

    async def json(self) -> Any: ...


def _required_params(method: Any) -> list[str]:
    try:
        sig = inspect.signature(method)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return []
    return [
        name
        for name, p in sig.parameters.items()
        if p.kind in _REQUIRED_KINDS and p.default is inspect.Parameter.empty
    ]


def _check_jsonable(data: Any, /) -> Validation[Jsonable]:
    method = getattr(data, "json", None)
    if method is None or not callable(method):
        return Validation.fail(
            [
                ValidationIssue(
                    path="json",
                    expected=_EXPECTED,
                    message=f"{type(data).__name__} has no callable 'json' attribute",
                    value=method,
                )
            ]
        )
    if not inspect.iscoroutinefunction(method):
        return Validation.fail(
            [
                ValidationIssue(
                    path="json",
                    expected=_EXPECTED,
                    message=f"{type(data).__name__}.json is not a coroutine function",
                    value=method,
                )
            ]
        )
    if required := _required_params(method):
        return Validation.fail(
            [
                ValidationIssue(
                    path="json",
                    expected=_EXPECTED,
                    message=f"json() requires arguments: {', '.join(required)}",
                    value=method,
                )
            ]
        )
    return Validation.ok(data)


JSONABLE: Validatable[Jsonable] = _check_jsonable
