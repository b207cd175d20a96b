from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

__all__ = (
    "Absent",
    "AbsentType",
    "MaybeAbsent",
    "is_absent",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Provides consistent interface for sentinel values with:
    - Identity preservation across deepcopy
    - Falsy boolean evaluation
    - Clear string representation
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    # concrete classes *must* override the two methods below
    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class AbsentType(SingletonType):
    """Sentinel for "no value was produced".

    Returned by extraction when the input was not usable. It is distinct
    from ``None`` so that a schema admitting JSON ``null`` stays unambiguous.

    Example:
        >>> data = await parse(request, Foo)
        >>> if data is Absent:
        ...     return error_response()
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Absent"]:
        return "Absent"

    def __str__(self) -> Literal["Absent"]:
        return "Absent"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "Absent"


Absent: Final = AbsentType()
"""No value was produced."""

MaybeAbsent = Union[T, AbsentType]


def is_absent(value: Any) -> bool:
    return value is Absent
