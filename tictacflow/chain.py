"""Lazily evaluated chains of single-argument steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional


class Step(ABC):
    """A deferred computation that yields a value when called."""

    @abstractmethod
    def call(self) -> Any:
        """Evaluate the chain and return its value."""

    def dbg(self) -> Any:
        """Evaluate the chain; shorthand for :meth:`call`."""
        return self.call()

    def then(self, f: Callable[[Any], Any]) -> "Then":
        """Append ``f`` to be applied to this step's result."""
        return Then(self, f)

    def and_(self, f: Callable[[Any], Any]) -> "And":
        """Append ``f`` to a chain that already ends in a transformation."""
        return And(self, f)

    def until(self, predicate: Callable[[Any], Optional[Any]]) -> "Until":
        """Repeat the last transformation until ``predicate`` yields a value."""
        return Until(self, predicate)


class State(Step):
    """The start of a chain, holding its initial value."""

    def __init__(self, initial: Any) -> None:
        self.initial = initial

    def call(self) -> Any:
        return self.initial


class _Link(Step):
    """A step made of a previous step and a function applied to its result."""

    def __init__(self, prev: Step, f: Callable[[Any], Any]) -> None:
        self.prev = prev
        self.f = f

    def unwrap(self) -> tuple[Step, Callable[[Any], Any]]:
        """Split into the step that leads here and the last function."""
        return self.prev, self.f


def _require_link(step: Step, operation: str) -> _Link:
    if not isinstance(step, _Link):
        raise TypeError(
            f"{operation}() needs a chain ending in a transformation, "
            f"got {type(step).__name__}"
        )
    return step


class Then(_Link):
    """Applies a function to the result of the previous step."""

    def call(self) -> Any:
        return self.f(self.prev.call())


class And(_Link):
    """Extends a chain that already ends in a transformation."""

    def __init__(self, prev: Step, f: Callable[[Any], Any]) -> None:
        _require_link(prev, "and_")
        super().__init__(prev, f)

    def call(self) -> Any:
        last_state, prev_fun = self.prev.unwrap()
        return self.f(prev_fun(last_state.call()))


class Until(Step):
    """Re-runs the last transformation on the same input until accepted.

    The input is evaluated once; the transformation is applied to that same
    input on every round and its result offered to ``predicate``. The first
    non-``None`` value the predicate returns is the result.
    """

    def __init__(self, prev: Step, predicate: Callable[[Any], Optional[Any]]) -> None:
        last_state, last_fun = _require_link(prev, "until").unwrap()
        self.last_state = last_state
        self.last_fun = last_fun
        self.predicate = predicate

    def call(self) -> Any:
        state = self.last_state.call()
        while True:
            accepted = self.predicate(self.last_fun(state))
            if accepted is not None:
                return accepted


@dataclass(frozen=True)
class Store:
    """Holds a function to be applied once or twice, discarding results."""

    f: Callable[[Any], Any]

    def call(self, arg: Any) -> None:
        self.f(arg)

    def call_twice(self, arg: Any) -> None:
        self.f(arg)
        self.f(arg)