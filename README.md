# tictacflow

Small building blocks for writing a turn-based game as a chain of steps,
together with a minimal tic-tac-toe model.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Call chains (`tictacflow.chain`)

A chain starts from a `State` that holds an initial value. Steps are added
with method calls, and nothing runs until the chain is called:

- `then(f)` adds a step that applies `f` to the result so far.
- `and_(f)` adds a step in the same way. It needs a chain that already ends
  in a transformation (a `then` or `and_` step); on a bare `State` it raises
  `TypeError`.
- `until(predicate)` evaluates the input of the last transformation once,
  then applies that transformation to the same input again and again,
  passing each result to `predicate`. The first value the predicate returns
  that is not `None` is the result. Like `and_`, it raises `TypeError`
  unless the chain ends in a transformation.
- `call()` (or `dbg()`) runs the chain and returns its result.

```python
from tictacflow.chain import State

result = State(0).then(lambda x: x + 2).and_(lambda _: "test").then(len).call()
assert result == 4
```

`Store` wraps a single function so that it can be called once with
`call(arg)` or twice with the same argument with `call_twice(arg)`. The
function's results are discarded.

## Tic-tac-toe model (`tictacflow.tic`)

- `Player`: the two players, `Player.CIRCLE` and `Player.CROSS`, shown as
  `O` and `X`.
- `Row`: one row of three fields; `None` marks an empty field.
  `check_win()` is true when every field equals the first one (an empty
  row counts as well).
- `Game`: an immutable board of three `Row`s and a turn order, which is
  `(Player.CIRCLE, Player.CROSS)` by default. `Game.start(order)` begins an
  empty board with the given turn order.
- `Coordinate`: a `column` and `row` pair.
- `render_board(game)` returns the board as text, each row numbered and
  framed by dashed lines; `print_game(game)` prints it and returns the game
  unchanged.
- `advance_turn(game)` returns a game with the first and last entries of
  the turn order swapped.
- `input_player_is_valid(inp)` turns `"Circle"`/`"O"` or `"Cross"`/`"X"`
  into the turn order starting with that player, or returns `None`.
- `get_user(inp)` reads the third and fourth characters of `inp`: the first
  must be `a`, `b` or `c` (column 1 to 3), and the code point of the second
  is taken as the row, which must be at most 3. Otherwise it returns `None`.

## Game flow (`tictacflow.flow`)

`Flow` holds a `Game`, a stack of actions (each taking and returning a
`Game`) and the index of the active level. A new flow has the identity
action at level 0.

- `Flow.start_by(get_input)` returns a `PendingInput` whose input step calls
  `get_input()`.
- `PendingInput.until(predicate)` returns a `RepeatUntil`.
- `RepeatUntil.repeat_by(fallback)` installs the input step at the active
  level and returns the `Flow`. When run, the step reads once; while
  `predicate` rejects the answer (returns `None`) it runs the action that
  was at that level and asks `fallback()` for another answer. It returns the
  flow's game with the accepted turn order.
- `after_that(f)` pushes `f` as a new, active level.
- `and_(f)` composes `f` after the active action and collapses the stack to
  that single composed action.
- `call(game)` runs the active action on `game`.
- `until(predicate)` runs the active action on the flow's game until
  `predicate` holds, stores the result in the flow and returns the flow.
- `finally_()` runs the bottom action of the stack on the flow's game.

```python
from tictacflow.flow import Flow
from tictacflow.tic import Player, input_player_is_valid

flow = Flow.start_by(lambda: "X").until(input_player_is_valid).repeat_by(lambda: "O")
game = flow.call(flow.game)
assert game.turn == (Player.CROSS, Player.CIRCLE)
```

## What it does not do

The package is a set of building blocks, not a playable game. It has no
command to start, it does not place moves on the board, and it does not
decide a winner beyond `Row.check_win()` on a single row.