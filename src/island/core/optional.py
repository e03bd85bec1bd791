"""Optional — a value-or-absence container with functional combinators.

``None`` is the absence marker, so a present container never holds ``None``.
Containers are immutable; every combinator returns a container instead of
mutating the receiver.

INVARIANT: Function arguments are checked for ``None`` before the held value
is touched (fail-fast), except where a method documents otherwise.
INVARIANT: Errors raised by mappers, predicates and suppliers propagate
unchanged.
"""

from __future__ import annotations

from typing import Any, Generic, NoReturn, TypeVar

from island.core.functions import ArgFunction, Consumer, Predicate, Supplier, VoidFunction
from island.errors import IslandRuntimeError, NoSuchElementError, NullArgumentError

T = TypeVar("T")
R = TypeVar("R")


def _require(argument: Any, name: str) -> None:
    if argument is None:
        raise NullArgumentError(f"Argument '{name}' must not be None", argument=name)


def _require_optional(result: Any, source: str) -> Optional[Any]:
    if not isinstance(result, Optional):
        raise TypeError(f"{source} must return an Optional, got {type(result).__name__}")
    return result


class Optional(Generic[T]):
    """A container which may or may not hold a non-None value.

    Usage::

        port = Optional.of_nullable(os.environ.get("PORT")).map(int).or_else(8080)
    """

    __slots__ = ("_value",)

    def __init__(self, value: T | None = None) -> None:
        self._value = value

    # --- Construction ---

    @classmethod
    def empty(cls) -> Optional[T]:
        return cls(None)

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Wrap *value*, raising :class:`NullArgumentError` for ``None``."""
        if value is None:
            raise NullArgumentError(argument="value")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        return cls(value)

    # --- Inspection ---

    @property
    def is_present(self) -> bool:
        return self._value is not None

    @property
    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        if self._value is None:
            raise NoSuchElementError()
        return self._value

    # --- Side effects ---

    def if_present(self, action: Consumer[T]) -> None:
        _require(action, "action")
        if self._value is not None:
            action(self._value)

    def if_present_or_else(self, action: Consumer[T], empty_action: VoidFunction) -> None:
        """Run *action* with the value, or *empty_action* when absent.

        Both callables are checked before branching, whichever runs.
        """
        _require(action, "action")
        _require(empty_action, "empty_action")
        if self._value is not None:
            action(self._value)
        else:
            empty_action()

    # --- Transformation ---

    def filter(self, predicate: Predicate[T]) -> Optional[T]:
        _require(predicate, "predicate")
        if self._value is not None and predicate(self._value):
            return self
        return Optional.empty()

    def map(self, mapper: ArgFunction[T, R | None]) -> Optional[R]:
        """Apply *mapper* to a present value; a ``None`` result yields empty."""
        _require(mapper, "mapper")
        if self._value is None:
            return Optional.empty()
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: ArgFunction[T, Optional[R] | None]) -> Optional[R]:
        """Apply a container-returning *mapper* without double-wrapping.

        A mapper returning anything other than an Optional or ``None`` raises
        ``TypeError``.
        """
        _require(mapper, "mapper")
        if self._value is None:
            return Optional.empty()
        result = mapper(self._value)
        if result is None:
            return Optional.empty()
        return _require_optional(result, "mapper")

    # --- Fallbacks ---

    def or_(self, supplier: Supplier[Optional[T]]) -> Optional[T]:
        """Return self when present, otherwise the container from *supplier*.

        *supplier* is checked even when the receiver is present. A supplier
        returning ``None`` raises :class:`NullArgumentError`; one returning a
        non-Optional raises ``TypeError``.
        """
        _require(supplier, "supplier")
        if self._value is not None:
            return self
        result = supplier()
        if result is None:
            raise NullArgumentError("Supplier returned None instead of an Optional")
        return _require_optional(result, "supplier")

    def or_else(self, other: T | None) -> T | None:
        """Return the value if present, else *other* verbatim (even ``None``)."""
        if self._value is not None:
            return self._value
        return other

    def or_else_get(self, supplier: Supplier[T]) -> T:
        """Return the value if present, else ``supplier()``.

        *supplier* is only checked when the receiver is empty.
        """
        if self._value is not None:
            return self._value
        _require(supplier, "supplier")
        return supplier()

    def or_else_raise(self, exception_supplier: Supplier[NoReturn] | None = None) -> T:
        """Return the value if present, otherwise raise.

        Without *exception_supplier* an empty receiver raises
        :class:`NoSuchElementError`. With one, the supplier is expected to
        raise itself; its exception propagates unchanged. A supplier that
        returns normally raises :class:`IslandRuntimeError`.
        """
        if self._value is not None:
            return self._value
        if exception_supplier is None:
            raise NoSuchElementError()
        exception_supplier()
        raise IslandRuntimeError("Supplier is not throwable")

    # --- Value semantics ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((Optional, self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty()"
        return f"Optional({self._value!r})"
