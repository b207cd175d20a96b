# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Schema descriptors and the structured result they produce.

A descriptor (``Validatable[T]``) is any callable taking an arbitrary value
and returning a ``Validation[T]``. Build one per shape, once, at import time:

    class Foo(TypedDict):
        bar: str

    FooSchema: Validatable[Foo] = validatable(Foo)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import orjson
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails
from typing_extensions import TypeAlias

from ..config import settings

__all__ = (
    "TypeValidator",
    "Validatable",
    "Validation",
    "ValidationIssue",
    "dump_issues",
    "issues_from_pydantic",
    "validatable",
)

T = TypeVar("T")

# pydantic error type -> expected type, named the way JSON schema names them
_EXPECTED_BY_ERROR_TYPE = {
    "string_type": "string",
    "string_unicode": "string",
    "string_sub_type": "string",
    "bytes_type": "bytes",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "decimal_type": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "dataclass_type": "object",
    "dataclass_exact_type": "object",
    "list_type": "array",
    "tuple_type": "array",
    "set_type": "array",
    "frozen_set_type": "array",
    "none_required": "null",
    "missing": "required",
    "extra_forbidden": "undefined",
}


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One schema violation.

    ``path`` locates the offending value (``"bar"``, ``"items[0].name"``,
    ``""`` for the root), ``expected`` names what the schema wanted there.
    """

    path: str
    expected: str
    message: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "expected": self.expected,
            "message": self.message,
            "value": self.value,
        }


@dataclass(frozen=True, slots=True)
class Validation(Generic[T]):
    """Outcome of one schema check.

    On success ``data`` holds the validated value and ``errors`` is empty.
    On failure ``data`` is None and ``errors`` lists every violation in the
    order the validator reported them.
    """

    success: bool
    data: T | None = None
    errors: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @classmethod
    def ok(cls, data: T) -> Validation[T]:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, errors: Iterable[ValidationIssue]) -> Validation[T]:
        errors = tuple(errors)
        if not errors:
            raise ValueError("A failed validation must carry at least one issue")
        return cls(success=False, errors=errors)

    def errors_json(self) -> str:
        return dump_issues(self.errors)


Validatable: TypeAlias = Callable[[Any], Validation[T]]
"""A side-effect-free function validating arbitrary input against one shape."""


def _format_loc(loc: Sequence[int | str]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def _expected(error: ErrorDetails) -> str:
    ctx = error.get("ctx") or {}
    if "expected" in ctx:
        return str(ctx["expected"])
    if "class_name" in ctx:
        return str(ctx["class_name"])
    return _EXPECTED_BY_ERROR_TYPE.get(error["type"], error["type"])


def issues_from_pydantic(
    exc: PydanticValidationError, limit: int | None = None
) -> list[ValidationIssue]:
    """Convert a pydantic ``ValidationError`` into ``ValidationIssue``s."""
    details = exc.errors(include_url=False)
    if limit is not None:
        details = details[:limit]
    return [
        ValidationIssue(
            path=_format_loc(e["loc"]),
            expected=_expected(e),
            message=e["msg"],
            value=e.get("input"),
        )
        for e in details
    ]


def dump_issues(issues: Iterable[ValidationIssue]) -> str:
    """Serialize issues to a JSON array string.

    Values orjson cannot encode natively are written as their ``repr``.
    """
    payload = [i.to_dict() for i in issues]
    try:
        return orjson.dumps(
            payload, default=repr, option=orjson.OPT_NON_STR_KEYS
        ).decode("utf-8")
    except orjson.JSONEncodeError:
        # e.g. integers beyond 64 bits
        for item in payload:
            item["value"] = repr(item["value"])
        return orjson.dumps(payload).decode("utf-8")


class TypeValidator(Generic[T]):
    """Descriptor backed by a compiled ``pydantic.TypeAdapter``.

    Accepts anything pydantic can validate: ``TypedDict``, ``BaseModel``,
    dataclasses, enums, datetimes, builtin generics, ``Literal`` and unions.

    In strict mode (the default) input is checked with pydantic's strict
    JSON-mode rules: a dict fills a dataclass, an ISO string a datetime, a
    list a tuple, but ``1`` never passes as ``"1"``. Input that cannot be
    encoded as JSON is checked with strict Python-mode rules instead.
    """

    __slots__ = ("_adapter", "name", "strict")

    def __init__(
        self,
        tp: type[T] | Any,
        /,
        *,
        strict: bool | None = None,
        name: str | None = None,
    ):
        self._adapter: TypeAdapter[T] = TypeAdapter(tp)
        self.strict = settings.PAYLOADGUARD_STRICT if strict is None else strict
        self.name = name or getattr(tp, "__name__", None) or repr(tp)

    def __call__(self, data: Any, /) -> Validation[T]:
        try:
            value = self._validate(data)
        except PydanticValidationError as e:
            return Validation.fail(
                issues_from_pydantic(
                    e, limit=settings.PAYLOADGUARD_MAX_REPORTED_ERRORS
                )
            )
        return Validation.ok(value)

    def _validate(self, data: Any) -> T:
        if not self.strict:
            return self._adapter.validate_python(data, strict=False)
        try:
            raw = orjson.dumps(data)
        except orjson.JSONEncodeError:
            # bytes, non-str keys, integers beyond 64 bits, arbitrary objects
            return self._adapter.validate_python(data, strict=True)
        return self._adapter.validate_json(raw, strict=True)

    def json_schema(self) -> dict[str, Any]:
        return self._adapter.json_schema()

    def __repr__(self) -> str:
        return f"TypeValidator({self.name}, strict={self.strict})"


def validatable(
    tp: type[T] | Any,
    /,
    *,
    strict: bool | None = None,
    name: str | None = None,
) -> TypeValidator[T]:
    """Create the descriptor for ``tp``.

    Call this once per type, at module level, and reuse the result.
    """
    return TypeValidator(tp, strict=strict, name=name)
