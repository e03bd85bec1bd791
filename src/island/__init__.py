"""island — type-safe helper constructs for application code.

Optional containers, validated nominal types, durations and timers,
functional type aliases and a small error hierarchy.
"""

from island.core.nominal import NominalGuard, Validator
from island.core.optional import Optional
from island.core.timers import Duration, Timer
from island.core.types import is_nil
from island.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorPayload,
    IslandError,
    IslandRuntimeError,
    NoSuchElementError,
    NullArgumentError,
    ValidationError,
)

__version__ = "0.3.0"

__all__ = [
    "ConfigurationError",
    "Duration",
    "ErrorCode",
    "ErrorPayload",
    "IslandError",
    "IslandRuntimeError",
    "NoSuchElementError",
    "NominalGuard",
    "NullArgumentError",
    "Optional",
    "Timer",
    "ValidationError",
    "Validator",
    "__version__",
    "is_nil",
]
