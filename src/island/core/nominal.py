"""Nominal typing — validated, zero-cost labels over base types.

A nominal label is a ``typing.NewType`` declared by the caller. The type
checker keeps labelled values apart from their base type and from each other;
at runtime the value is the unchanged base object. :class:`NominalGuard`
pairs the label with a validator and is the only checked way to produce a
labelled value::

    NonNegative = NewType("NonNegative", int)

    non_negative: NominalGuard[NonNegative, int] = NominalGuard(
        lambda n: n >= 0 or "Value must not be negative",
        name="NonNegative",
    )

    count = non_negative.identity(3)  # typed as NonNegative

A validator returns ``True`` for a valid value, ``False`` for an invalid one,
or a ``str`` explaining why the value was rejected. ``typing.cast`` remains
available as an unchecked escape hatch; it skips validation entirely and is
unsafe by nature.

INVARIANT: ``is_`` and ``assert_`` share one decision, so they never
disagree about the same input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeAlias, TypeGuard, TypeVar, cast

from island.core.optional import Optional
from island.errors import NullArgumentError, ValidationError

logger = logging.getLogger(__name__)

TBase = TypeVar("TBase")
TNominal = TypeVar("TNominal")

Validator: TypeAlias = Callable[[TBase], bool | str]


class NominalGuard(Generic[TNominal, TBase]):
    """Validator-backed constructor for the nominal type *TNominal*."""

    __slots__ = ("_validator", "_name")

    def __init__(self, validator: Validator[TBase], *, name: str | None = None) -> None:
        if validator is None:
            raise NullArgumentError("Argument 'validator' must not be None", argument="validator")
        self._validator = validator
        self._name = name

    @property
    def name(self) -> str | None:
        return self._name

    def _rejection(self, value: TBase) -> str | None:
        """Return the rejection reason for *value*, or None when it is valid."""
        result = self._validator(value)
        if isinstance(result, str):
            return result
        if result:
            return None
        return f"Invalid value {value}"

    def is_(self, value: TBase) -> TypeGuard[TNominal]:
        """Return True when *value* passes validation. Never raises on rejection."""
        return self._rejection(value) is None

    def assert_(self, value: TBase) -> None:
        """Raise :class:`ValidationError` when *value* fails validation."""
        reason = self._rejection(value)
        if reason is not None:
            logger.debug("Rejected value for %s: %s", self._name or "nominal type", reason)
            raise ValidationError(reason, nominal=self._name)

    def identity(self, value: TBase) -> TNominal:
        """Validate *value* and return it, labelled as *TNominal*."""
        self.assert_(value)
        return cast(TNominal, value)

    __call__ = identity

    def optional(self, value: TBase | None) -> Optional[TNominal]:
        """Wrap *value* when it is present and valid, else return empty."""
        if value is None or not self.is_(value):
            return Optional.empty()
        return Optional.of(cast(TNominal, value))

    def __repr__(self) -> str:
        if self._name is None:
            return "NominalGuard()"
        return f"NominalGuard({self._name!r})"
