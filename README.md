# chesscore

A chess board and its pieces, each piece knowing its own move rules. It also
has a small console launcher.

## Installation

```
pip install .
```

## The console launcher

```
chesscore
```

This prints the starting position with chess glyphs. It then asks
`Enter number of players: ` and keeps asking until you enter 1 or 2. Any
other answer, including one that is not a number, asks again. The command
exits with status 0 once you have chosen. If the input ends before a valid
answer, it prints a message to standard error and exits with status 1.
`--help` is the only option.

## Using the library

```python
from chesscore.board import Board
from chesscore.piece import PieceType, Team

board = Board()
print(board.render())

piece = board.get_square(0, 0)
assert piece.kind is PieceType.ROOK
assert piece.color is Team.WHITE
```

- `chesscore.piece`
  - `Team` is an int enum with `BLACK = 0` and `WHITE = 1`.
  - `PieceType` is an enum of `PAWN`, `BISHOP`, `KNIGHT`, `ROOK`, `QUEEN`,
    `KING` and `EMPTY`.
  - `Piece` is the abstract base class. It has the attributes `x`, `y`,
    `color`, `movements`, `kind` and `alive`, and the methods `move(new_x,
    new_y)`, `eat(enemy)`, `die()` and the abstract `is_legal_move(new_x,
    new_y, board)`.
- `chesscore.pieces` holds `Pawn`, `Knight`, `Bishop`, `Rook`, `Queen` and
  `King`.
  - Each one implements `is_legal_move(new_x, new_y, board)`, which returns a
    bool.
  - When `Bishop`, `Rook`, `Queen` or `King` finds an enemy piece on the
    target square, the check marks that piece as dead and returns `True`.
  - `Knight` accepts only an empty target square.
  - `Pawn` records whether it has made its first move. It also has
    `check_position()`, which marks the promotion rank as reached, and
    `promote(promotion)`, which puts the given piece on the pawn's square and
    marks the pawn dead.
  - `Rook` and `King` carry a `can_castle` flag.
- `chesscore.board.Board` sets up the starting position.
  - `get_square(x, y)` returns the piece stored there, or `None`.
  - `render()` returns the board as text, one line per rank, with `.` for an
    empty square.
  - `print_board(stream=None)` writes that text to a stream, standard output
    by default.
- `chesscore.game`
  - `GameManager(players=0, input_stream=None, output_stream=None)` runs the
    console session. `run()` prints a fresh board, asks for the number of
    players and returns the choice. It raises `EOFError` if the input runs
    out first.
  - `main(argv=None)` is the function behind the `chesscore` command.

## What it does not do

- The launcher stops once the number of players is chosen. No moves are
  played, and there is no opponent.
- `is_legal_move` never moves a piece on the board. `Board` has no method for
  making a move.
- There is no check, checkmate, castling, en passant or game-end detection.
- Nothing is saved between runs.

## Running the tests

```
pip install .[test]
pytest
```