"""Option errors — raised or returned when a value is absent."""

from __future__ import annotations

from typing import Any

from optval.kernel.errors.base import BaseError


class OptionError(BaseError):
    """Base class for errors about optional values."""

    default_code = "option_error"


class EmptyValueError(OptionError):
    """``unwrap()`` was called on an ``Absent`` value.

    This signals a programming error: the call site should have proven
    presence first. Fix the caller instead of catching this.
    """

    default_code = "empty_value"

    def __init__(
        self,
        message: str = "called unwrap() on an Absent value",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class MissingValueError(OptionError):
    """Recoverable error carried by ``Err`` when ``expect()`` finds no value."""

    default_code = "missing_value"


__all__ = ["EmptyValueError", "MissingValueError", "OptionError"]
