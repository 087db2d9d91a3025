"""Option[T] — Present and Absent variants.

An ``Option`` either holds exactly one value (:class:`Present`) or holds
nothing (:class:`Absent`).  ``Absent`` carries no payload at all, so
``Present(None)`` and ``Absent()`` are different values.

Both variants are immutable; every combinator returns a new option (or one
of its inputs unchanged) and never mutates the receiver.

Usage::

    from optval import absent, map_, present

    port = present(8080)
    label = map_(port, lambda p: f"port {p}")     # Present('port 8080')
    missing: Option[int] = absent()
    missing.unwrap_or(80)                          # 80

Extraction comes in two flavours:

* :meth:`Present.unwrap` / :meth:`Absent.unwrap` raise
  :class:`~optval.kernel.errors.EmptyValueError` on an empty option.  Only
  call it where presence is already proven; the error marks a bug at the
  call site, not a condition to recover from.
* :meth:`expect` returns a :class:`~optval.kernel.types.result.Result`
  instead, with ``Err(MissingValueError(message))`` for an empty option.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, NoReturn, TypeVar

from optval.kernel.errors import EmptyValueError, MissingValueError
from optval.kernel.types.result import Err, Ok, Result
from optval.observability.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")

_log = get_logger(__name__)


class Present(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> T:
        return self._value

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_else(self, fallback: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def expect(self, message: str) -> Result[T, MissingValueError]:  # noqa: ARG002
        return Ok(self._value)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def map(self, func: Callable[[T], U]) -> "Present[U]":
        return Present(func(self._value))

    def flat_map(self, func: "Callable[[T], Option[U]]") -> "Option[U]":
        return func(self._value)

    def and_(self, other: "Option[U]") -> "Option[U]":
        return other

    def or_(self, alt: "Option[T]") -> "Present[T]":  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if predicate(self._value):
            return self
        return Absent()

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __str__(self) -> str:
        return f"Present({self._value})"

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent(Generic[T]):
    """Empty option."""

    __slots__ = ()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise :class:`EmptyValueError`.

        ``unwrap()`` is only meant for call sites that already know the
        option is present. Reaching this method is a bug in the caller.
        """
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("option.unwrap_absent")
        raise EmptyValueError()

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fallback: Callable[[], T]) -> T:
        return fallback()

    def expect(self, message: str) -> Result[T, MissingValueError]:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("option.expect_absent", expect_message=message)
        return Err(MissingValueError(message))

    def map(self, func: Callable[[T], U]) -> "Absent[U]":  # noqa: ARG002
        return Absent()

    def flat_map(self, func: "Callable[[T], Option[U]]") -> "Absent[U]":  # noqa: ARG002
        return Absent()

    def and_(self, other: "Option[U]") -> "Absent[U]":  # noqa: ARG002
        return Absent()

    def or_(self, alt: "Option[T]") -> "Option[T]":
        return alt

    def filter(self, predicate: Callable[[T], bool]) -> "Absent[T]":  # noqa: ARG002
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Absent):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Absent)

    def __str__(self) -> str:
        return "Absent"

    def __repr__(self) -> str:
        return "Absent"


type Option[T] = Present[T] | Absent[T]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def present(value: T) -> Option[T]:
    """Wrap *value* in ``Present``. ``None`` is a valid payload."""
    return Present(value)


def absent() -> Option[T]:
    """Return an empty option; the element type comes from the call site."""
    return Absent()


def from_nullable(value: T | None) -> Option[T]:
    """``Absent`` for ``None``, ``Present(value)`` otherwise."""
    if value is None:
        return Absent()
    return Present(value)


# ---------------------------------------------------------------------------
# Free-function combinators
# ---------------------------------------------------------------------------


def map_(opt: Option[T], func: Callable[[T], U]) -> Option[U]:
    """Apply *func* to the held value; ``func`` is never called on ``Absent``."""
    return opt.map(func)


def flat_map(opt: Option[T], func: Callable[[T], Option[U]]) -> Option[U]:
    return opt.flat_map(func)


def and_(opt: Option[T], other: Option[U]) -> Option[U]:
    """``Absent`` when *opt* is absent, otherwise *other* unchanged.

    Only the presence of *opt* is looked at, never its value.
    """
    return opt.and_(other)


def or_(opt: Option[T], alt: Option[T]) -> Option[T]:
    """*opt* when present, otherwise *alt*."""
    return opt.or_(alt)


def filter_(opt: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep *opt* only if its value satisfies *predicate* (called at most once)."""
    return opt.filter(predicate)


__all__ = [
    "Absent",
    "Option",
    "Present",
    "absent",
    "and_",
    "filter_",
    "flat_map",
    "from_nullable",
    "map_",
    "or_",
    "present",
]
