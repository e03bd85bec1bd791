"""Nil helpers and small structural type aliases."""

from __future__ import annotations

from typing import Any, TypeAlias, TypeGuard, TypeVar

T = TypeVar("T")

Nil: TypeAlias = None

Nullable: TypeAlias = T | None

Primitive: TypeAlias = bool | int | float | str | bytes | None

# A class object whose instances are T.
CtorType: TypeAlias = type[T]


def is_nil(value: Any) -> TypeGuard[None]:
    """Return True when *value* is the absence marker (``None``)."""
    return value is None
