"""Shared pytest fixtures for island tests."""

from __future__ import annotations

from typing import NewType

import pytest

from island.core.nominal import NominalGuard

NonNegative = NewType("NonNegative", int)
NonPositive = NewType("NonPositive", int)


@pytest.fixture(autouse=True)
def _clean_island_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ISLAND_* variables from the host environment out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("ISLAND_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def non_negative() -> NominalGuard[NonNegative, int]:
    """Guard whose validator explains its rejections."""
    return NominalGuard(lambda n: n >= 0 or "Value must not be negative", name="NonNegative")


@pytest.fixture
def non_positive() -> NominalGuard[NonPositive, int]:
    """Guard whose validator only answers True/False."""
    return NominalGuard(lambda n: n <= 0, name="NonPositive")
