"""Typed Result container used inside every transform.

Motivation
----------
The public operations never raise: a malformed completion yields ``None``, an
empty list, or the untouched input. Inside each operation we still want to say
*why* a payload was rejected, so the implementations return a ``Result``:

- ``Ok(value)``  : the extracted / parsed / rewritten payload,
- ``Err(reason)``: a short diagnostic such as ``"> invalid : no opening backticks found"``.

At the public boundary :meth:`Result.unwrap_or_log` writes the diagnostic to
the component logger and swaps in the component's sentinel.

Example
-------
>>> from genparse.core.result import ok, err, Result
>>> def non_empty(x: str) -> Result[str, str]:
...     return ok(x) if x.strip() else err("> invalid : empty content")
>>> ok(" a ").map(str.strip).flat_map(non_empty).unwrap()
'a'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
S = TypeVar("S")


class Result(Generic[T, E]):
    """Either a payload (`Ok[T]`) or a diagnostic (`Err[E]`)."""

    # ----- Introspection -----------------------------------------------------
    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    # ----- Unwraps -----------------------------------------------------------
    def unwrap(self) -> T:
        """Return the payload, raising ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the diagnostic if ``Err``, else raise."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")

    def unwrap_or_log(
        self,
        logger: logging.Logger,
        label: str,
        fallback: S,
        *,
        level: int = logging.ERROR,
    ) -> T | S:
        """Return the payload, or log the diagnostic under ``label`` and return ``fallback``.

        Parameters
        ----------
        logger:
            Component logger that receives the diagnostic.
        label:
            Operation tag prefixed to the message, e.g. ``"extract_backticks"``.
        fallback:
            Sentinel handed back to the caller on ``Err``.
        level:
            Logging level for the diagnostic (``ERROR`` by default).
        """
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        logger.log(level, "%s:error %s", label, cast(Err[T, E], self).error)
        return fallback

    # ----- Combinators -------------------------------------------------------
    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the payload; propagate the diagnostic unchanged."""
        if isinstance(self, Ok):
            return Ok(fn(cast(Ok[T, E], self).value))
        return cast(Result[U, E], self)

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a step that can itself reject the payload."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return cast(Result[U, E], self)

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        if isinstance(self, Ok):
            return f"Ok({cast(Ok[T, E], self).value!r})"
        if isinstance(self, Err):
            return f"Err({cast(Err[T, E], self).error!r})"
        return "Result(?)"


@dataclass(frozen=True, repr=False)
class Ok(Result[T, E]):
    """Accepted payload of type ``T``."""

    value: T


@dataclass(frozen=True, repr=False)
class Err(Result[T, E]):
    """Rejection carrying a diagnostic of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)
