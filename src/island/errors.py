"""Exception hierarchy and the structured error payload.

Every error carries a stable :class:`ErrorCode` so callers can branch on the
kind of failure without matching message text. ``to_payload()`` turns an
error into a frozen :class:`ErrorPayload` for logging or serialization.

INVARIANT: Errors raised by caller-supplied functions are never wrapped.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Stable identifiers for each error kind."""

    GENERAL = "general"
    RUNTIME = "runtime"
    NO_SUCH_ELEMENT = "no_such_element"
    VALIDATION = "validation"
    NULL_ARGUMENT = "null_argument"
    CONFIGURATION = "configuration"


class ErrorPayload(BaseModel):
    """Structured, serializable view of an :class:`IslandError`."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class IslandError(Exception):
    """Base class for all errors raised by island.

    Args:
        message: Human-readable message. Falls back to the class default.
        **detail: Extra context attached to the error payload.
    """

    code: ClassVar[ErrorCode] = ErrorCode.GENERAL
    default_message: ClassVar[str] = ""

    def __init__(self, message: str | None = None, **detail: Any) -> None:
        self.message = self.default_message if message is None else message
        self.detail = detail
        super().__init__(self.message)

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=self.message, detail=self.detail)


class IslandRuntimeError(IslandError, RuntimeError):
    """Contract violation not covered by a more specific error."""

    code = ErrorCode.RUNTIME
    default_message = "Runtime error"


class NoSuchElementError(IslandRuntimeError):
    """Raised by accessors when the requested element does not exist."""

    code = ErrorCode.NO_SUCH_ELEMENT
    default_message = "Element being requested does not exist"


class ValidationError(IslandError, ValueError):
    """Raised when a validator rejects a value.

    Not related to ``pydantic.ValidationError``. Code that handles both should
    import this one as ``island.errors.ValidationError`` or alias it.
    """

    code = ErrorCode.VALIDATION
    default_message = "Assertion error"


class NullArgumentError(IslandError, TypeError):
    """Raised when ``None`` arrives where a value or callable is required."""

    code = ErrorCode.NULL_ARGUMENT
    default_message = "Passed None where a value was expected"


class ConfigurationError(IslandError):
    """Raised when a config file cannot be read or parsed."""

    code = ErrorCode.CONFIGURATION
    default_message = "Invalid configuration"
