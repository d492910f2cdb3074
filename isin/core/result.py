"""Ok / Err: the return shape of every fallible ISIN operation.

Parsing and building never raise for bad input. Callers pattern-match:

    match parse(raw):
        case Ok(isin): ...
        case Err(error): ...

unwrap() is for tests and boundaries that have already validated;
partition() splits a batch of results for screeners that report every
failure instead of stopping at the first.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E

    def unwrap_or[D](self, default: D) -> D:
        """The fallback, since there is no value."""
        return default


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Value of an Ok; RuntimeError carrying the error of an Err."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise RuntimeError(f"unwrap on Err: {error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def partition[T, E](results: Iterable[Ok[T] | Err[E]]) -> tuple[list[T], list[E]]:
    """Split results into (values, errors), keeping input order in each."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                errors.append(e)
    return values, errors
