# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, TypeVar

from typing_extensions import TypeGuard

from .validatable import Validatable, Validation, ValidationIssue

__all__ = ("check", "ensure")

T = TypeVar("T")


def _schema_name(schema: Any) -> str:
    return (
        getattr(schema, "name", None)
        or getattr(schema, "__name__", None)
        or type(schema).__name__
    )


def check(data: Any, schema: Validatable[T]) -> Validation[T]:
    """Run ``schema`` against ``data`` and return the structured result.

    Never raises. A descriptor that raises, or that returns something other
    than a ``Validation``, yields a failed result with one root-level issue.

    Args:
        data: Any value, already parsed (not an object with a ``json()``
            method still to be awaited).
        schema: The descriptor for the expected type.

    Returns:
        Validation[T]: ``success`` plus either the validated ``data`` or the
            ordered ``errors``.
    """
    try:
        result = schema(data)
    except Exception as e:
        return Validation.fail(
            [
                ValidationIssue(
                    path="",
                    expected=_schema_name(schema),
                    message=f"{type(e).__name__}: {e}",
                    value=data,
                )
            ]
        )
    if not isinstance(result, Validation):
        return Validation.fail(
            [
                ValidationIssue(
                    path="",
                    expected=_schema_name(schema),
                    message=(
                        f"validator returned {type(result).__name__}, "
                        "expected Validation"
                    ),
                    value=data,
                )
            ]
        )
    return result


def ensure(data: Any, schema: Validatable[T]) -> TypeGuard[T]:
    """Type predicate for already parsed data.

    Example:
        >>> if not ensure(data, Foo):
        ...     return error
        >>> data["bar"]  # data is typed as Foo here
    """
    return check(data, schema).success
