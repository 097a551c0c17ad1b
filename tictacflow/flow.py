"""A small pipeline of game-state actions driven by user input."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from tictacflow.tic import Game, Player

Action = Callable[[Game], Game]
InputAction = Callable[[Game], str]
TurnOrder = tuple[Player, ...]


def _identity(game: Game) -> Game:
    return game


@dataclass
class Flow:
    """A game together with a stack of actions and the active level."""

    game: Game = field(default_factory=Game)
    stack: list[Action] = field(default_factory=lambda: [_identity])
    level: int = 0

    @classmethod
    def start_by(cls, get_input: Callable[[], str]) -> "PendingInput":
        """Begin a flow whose first step reads input with ``get_input``."""
        return PendingInput(lambda game: get_input(), cls())

    def after_that(self, f: Action) -> "Flow":
        """Push ``f`` as a new level on top of the stack."""
        return Flow(self.game, [*self.stack, f], self.level + 1)

    def and_(self, f: Action) -> "Flow":
        """Compose ``f`` after the active action, collapsing the stack."""
        current = self.stack[self.level]
        return Flow(self.game, [lambda game: f(current(game))], self.level)

    def call(self, game: Game) -> Game:
        """Run the active action on ``game``."""
        return self.stack[self.level](game)

    def finally_(self) -> None:
        """Run the bottom action on the flow's game."""
        self.stack[0](self.game)

    def until(self, predicate: Callable[[Game], bool]) -> "Flow":
        """Run the active action repeatedly until ``predicate`` holds."""
        game = self.game
        while not predicate(game):
            game = self.call(game)
        self.game = game
        return self


@dataclass
class PendingInput:
    """A flow waiting for a validator for its input step."""

    read: InputAction
    flow: Flow

    def until(self, predicate: Callable[[str], Optional[TurnOrder]]) -> "RepeatUntil":
        return RepeatUntil(self.read, self.flow, predicate)


@dataclass
class RepeatUntil:
    """An input step with its validator, waiting for a fallback source."""

    read: InputAction
    flow: Flow
    predicate: Callable[[str], Optional[TurnOrder]]

    def repeat_by(self, fallback: Callable[[], str]) -> Flow:
        """Install the input step at the active level and return the flow.

        The step reads once; while the answer is rejected it runs the action
        that was at this level and asks ``fallback`` for another answer. The
        accepted turn order is set on the flow's own game.
        """
        flow = self.flow
        previous = flow.stack[flow.level]
        read, predicate = self.read, self.predicate

        def step(game: Game) -> Game:
            answer = read(game)
            while (order := predicate(answer)) is None:
                game = previous(game)
                answer = fallback()
            return replace(flow.game, turn=tuple(order))

        stack = list(flow.stack)
        stack[flow.level] = step
        return Flow(flow.game, stack, flow.level)