"""Kernel – the Option and Result value types and their errors."""

from optval.kernel.errors import (
    BaseError,
    EmptyValueError,
    MissingValueError,
    OptionError,
)

__all__ = [
    "BaseError",
    "EmptyValueError",
    "MissingValueError",
    "OptionError",
]
