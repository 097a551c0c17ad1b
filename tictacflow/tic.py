"""Tic-tac-toe board, players and input helpers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

BOARDSIZE = 3
PADDING = BOARDSIZE * 3 + 2


class Player(Enum):
    CIRCLE = "O"
    CROSS = "X"

    def __str__(self) -> str:
        return self.value


PLAYERS = len(Player)

Field = Optional[Player]


def _field_str(cell: Field) -> str:
    return " " if cell is None else str(cell)


def _empty_cells() -> tuple[Field, ...]:
    return (None,) * BOARDSIZE


@dataclass(frozen=True)
class Row:
    """One row of the board; ``None`` marks an empty field."""

    cells: tuple[Field, ...] = field(default_factory=_empty_cells)

    def check_win(self) -> bool:
        """True when every field in the row equals the first one."""
        first = self.cells[0]
        return all(cell == first for cell in self.cells)

    def __str__(self) -> str:
        return "".join(f"| {_field_str(cell)}" for cell in self.cells) + "|"


def _empty_board() -> tuple[Row, ...]:
    return tuple(Row() for _ in range(BOARDSIZE))


@dataclass(frozen=True)
class Game:
    """The board and the order in which players take turns."""

    board: tuple[Row, ...] = field(default_factory=_empty_board)
    turn: tuple[Player, ...] = (Player.CIRCLE, Player.CROSS)

    @classmethod
    def start(cls, order) -> "Game":
        """A fresh board with the given turn order."""
        return cls(turn=tuple(order))


@dataclass(frozen=True)
class Coordinate:
    column: int
    row: int


def render_board(game: Game) -> str:
    """The board as text, each row numbered and framed by dashed lines."""
    rule = "-" * PADDING
    rows = "".join(f"\n{rule}\n{index}{row}" for index, row in enumerate(game.board))
    return f"{rows}\n{rule}"


def print_game(game: Game) -> Game:
    """Print the board and hand the game back unchanged."""
    print(render_board(game))
    return game


def advance_turn(game: Game) -> Game:
    """Swap the first and last entries of the turn order."""
    turn = list(game.turn)
    turn[0], turn[-1] = turn[-1], turn[0]
    return replace(game, turn=tuple(turn))


def input_player_is_valid(inp: str) -> Optional[tuple[Player, Player]]:
    """Turn order chosen by the named starting player, or None."""
    if inp in ("Circle", "O"):
        return (Player.CIRCLE, Player.CROSS)
    if inp in ("Cross", "X"):
        return (Player.CROSS, Player.CIRCLE)
    return None


_COLUMNS = {"a": 1, "b": 2, "c": 3}


def get_user(inp: str) -> Optional[Coordinate]:
    """Read a coordinate from the third and fourth characters of ``inp``.

    The column letter must be ``a``, ``b`` or ``c``; the row is the code
    point of the fourth character, which must lie between 0 and 3.
    """
    chars = inp[2:4]
    if len(chars) < 2:
        return None
    alpha, num = chars
    column = _COLUMNS.get(alpha)
    if column is None:
        return None
    row = ord(num)
    if row > 3:
        return None
    return Coordinate(column, row)