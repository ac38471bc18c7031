"""The chess board and its starting position."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from chesscore.piece import BOARD_X, BOARD_Y, Piece, PieceType, Team
from chesscore.pieces import Bishop, King, Knight, Pawn, Queen, Rook

_SYMBOLS = {
    (PieceType.PAWN, Team.WHITE): "♙",
    (PieceType.PAWN, Team.BLACK): "♟",
    (PieceType.KNIGHT, Team.WHITE): "♘",
    (PieceType.KNIGHT, Team.BLACK): "♞",
    (PieceType.BISHOP, Team.WHITE): "♗",
    (PieceType.BISHOP, Team.BLACK): "♝",
    (PieceType.ROOK, Team.WHITE): "♖",
    (PieceType.ROOK, Team.BLACK): "♜",
    (PieceType.QUEEN, Team.WHITE): "♕",
    (PieceType.QUEEN, Team.BLACK): "♛",
    (PieceType.KING, Team.WHITE): "♔",
    (PieceType.KING, Team.BLACK): "♚",
}

_EMPTY = "."

# Back-rank piece classes by file, and the file of each side's king and queen.
_BACK_RANK = {0: Rook, 1: Knight, 2: Bishop, 5: Bishop, 6: Knight, 7: Rook}


class Board:
    """An 8x8 board set up with the starting position."""

    def __init__(self) -> None:
        self._squares: list[list[Optional[Piece]]] = [
            [None] * BOARD_Y for _ in range(BOARD_X)
        ]
        for x in range(BOARD_X):
            self._place(Pawn(x, 1, Team.WHITE))
            self._place(Pawn(x, 6, Team.BLACK))
        for x, piece_class in _BACK_RANK.items():
            self._place(piece_class(x, 0, Team.WHITE))
            self._place(piece_class(x, 7, Team.BLACK))
        self._place(Queen(3, 0, Team.WHITE))
        self._place(Queen(4, 7, Team.BLACK))
        self._place(King(4, 0, Team.WHITE))
        self._place(King(3, 7, Team.BLACK))

    def _place(self, piece: Piece) -> None:
        self._squares[piece.x][piece.y] = piece

    def get_square(self, x: int, y: int) -> Optional[Piece]:
        """Return the piece stored at file ``y``, rank ``x``, or None.

        The first coordinate selects the rank and the second the file.
        """
        return self._squares[y][x]

    def render(self) -> str:
        """Return the board as text, rank 0 first, one line per rank."""
        lines = []
        for y in range(BOARD_Y):
            cells = []
            for column in self._squares:
                piece = column[y]
                if piece is None:
                    cells.append(_EMPTY)
                else:
                    cells.append(_SYMBOLS.get((piece.kind, piece.color), ""))
            lines.append(" ".join(cells) + "\n")
        return "".join(lines)

    def print_board(self, stream: Optional[TextIO] = None) -> None:
        """Write the rendered board to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.render())