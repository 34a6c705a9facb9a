"""Ok/Err values for the few lookups in clozeterms that can fail.

Term extraction never fails. Two things can: turning a user-supplied splitter
name or pattern into a splitter, and reading a document from the CLI. Both
return a `Result[T, E]` and let the caller decide whether to print a message,
raise, or exit.

>>> from clozeterms.core.result import ok, err
>>> err("bad pattern").is_err()
True
>>> ok(3).unwrap()
3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Either `Ok[T]` holding a value or `Err[E]` holding an error message."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the value; an ``Err`` raises :class:`RuntimeError`."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def expect(self, msg: str) -> T:
        """Like :meth:`unwrap`, but the ``RuntimeError`` carries `msg`."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(msg)

    def unwrap_err(self) -> E:
        """Return the error; an ``Ok`` raises :class:`RuntimeError`."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E


def ok(value: T) -> Result[T, E]:
    return Ok(value)


def err(error: E) -> Result[T, E]:
    return Err(error)


__all__ = ["Err", "Ok", "Result", "err", "ok"]
