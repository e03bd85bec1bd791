"""Generic functional type aliases.

Pure type declarations with no runtime behaviour. Subscript them like any
generic alias::

    is_even: Predicate[int] = lambda n: n % 2 == 0
    make_id: Supplier[str] = lambda: uuid4().hex
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeAlias, TypeVar

T = TypeVar("T")
TParam = TypeVar("TParam")
TReturn = TypeVar("TReturn")
P = ParamSpec("P")

ArgFunction: TypeAlias = Callable[[TParam], TReturn]
Consumer: TypeAlias = Callable[[T], None]
Predicate: TypeAlias = Callable[[T], bool]
Supplier: TypeAlias = Callable[[], TReturn]

VoidFunction: TypeAlias = Callable[[], None]
AsyncVoidFunction: TypeAlias = Callable[[], Awaitable[None]]

FunctionWithArgs: TypeAlias = Callable[P, TReturn]
VoidFunctionWithArgs: TypeAlias = Callable[P, None]
