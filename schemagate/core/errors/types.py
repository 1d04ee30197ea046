"""Result type for schema compilation.

Every compile function answers with ``Ok(value)`` or ``Err(error)``; an invalid
schema never raises inside the compiler. Both variants support structural
pattern matching:

    match compile_fn(ctx, parent, fragment):
        case Ok(validator): ...
        case Err(error): ...
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A compiled value."""
    value: T

    def is_ok(self) -> bool: return True

    def is_err(self) -> bool: return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Expected an error, got {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the value, e.g. wrap a compiled node in its validator."""
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A compilation failure; ``error`` says what and where."""
    error: E

    def is_ok(self) -> bool: return False

    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Expected a value, got error {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    # Errors pass through untouched
    def map(self, f: Callable[[T], U]) -> Err[E]:
        return self

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]


def sequence_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect the values of ``results`` into one Ok list.

    Stops at the first Err and returns it; the rest of ``results`` is never
    consumed, so a generator of compile steps stops compiling too.
    """
    values: list[T] = []
    for result in results:
        if result.is_err():
            return result
        values.append(result.unwrap())
    return Ok(values)
