"""The six chess pieces and their movement rules."""

from __future__ import annotations

from chesscore.piece import BOARD_Y, BoardLike, Piece, PieceType, Team


def _step(delta: int) -> int:
    return 1 if delta > 0 else -1


def _diagonal_path_clear(piece: Piece, new_x: int, new_y: int, board: BoardLike) -> bool:
    """Check the squares strictly between the piece and a diagonal target."""
    step_x = _step(new_x - piece.x)
    step_y = _step(new_y - piece.y)
    return all(
        board.get_square(piece.x + i * step_x, piece.y + i * step_y) is None
        for i in range(1, abs(new_x - piece.x))
    )


class Pawn(Piece):
    """A pawn: one square forward, or up to two on its first move."""

    def __init__(self, x: int, y: int, color: int) -> None:
        super().__init__(x, y, color, 1, PieceType.PAWN)
        self.first_move = True
        self.last_move = False
        self.can_eat = False

    def _is_clear(self, board: BoardLike, offset: int) -> bool:
        # Pawns look up the board with the rank as the first coordinate.
        return board.get_square(self.y + offset, self.x) is None

    def is_legal_move(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        if self.first_move:
            if (
                self.color is Team.WHITE
                and self._is_clear(board, 1)
                and self._is_clear(board, 2)
            ):
                if 0 < new_y - self.y <= 2 and new_x == self.x:
                    self.first_move = False
                    return True
            elif self._is_clear(board, -1) and self._is_clear(board, -2):
                if 0 < self.y - new_y <= 2 and new_x == self.x:
                    self.first_move = False
                    return True
        if self.last_move:
            return False
        if not self.first_move:
            if self.color is Team.WHITE and self._is_clear(board, 1):
                return new_x == self.x and new_y == self.y + self.movements
            if self._is_clear(board, -1):
                return new_x == self.x and new_y == self.y - self.movements
        return False

    def check_position(self) -> None:
        """Mark the pawn as having reached its promotion rank."""
        if self.color is Team.WHITE:
            if self.y == BOARD_Y:
                self.last_move = True
        elif self.y == 0:
            self.last_move = True

    def promote(self, promotion: Piece) -> None:
        """Replace this pawn with ``promotion`` on the same square."""
        promotion.x = self.x
        promotion.y = self.y
        self.alive = False


class Knight(Piece):
    """A knight."""

    def __init__(self, x: int, y: int, color: int) -> None:
        super().__init__(x, y, color, 3, PieceType.KNIGHT)

    def is_legal_move(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        return (
            (new_x - self.x) + (new_y - self.y) == self.movements
            and board.get_square(new_x, new_y) is None
        )


class Bishop(Piece):
    """A bishop: any distance along a diagonal."""

    def __init__(self, x: int, y: int, color: int) -> None:
        super().__init__(x, y, color, 8, PieceType.BISHOP)

    def is_legal_move(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        delta_x = new_x - self.x
        if abs(delta_x) != abs(new_y - self.y) or delta_x == 0:
            return False
        if not _diagonal_path_clear(self, new_x, new_y, board):
            return False
        return self._claim_target(new_x, new_y, board)


class Rook(Piece):
    """A rook: along a rank or a file."""

    def __init__(self, x: int, y: int, color: int, can_castle: bool = True) -> None:
        super().__init__(x, y, color, 8, PieceType.ROOK)
        self.can_castle = can_castle

    def is_legal_move(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        if new_x != self.x and new_y != self.y:
            return False
        return self._claim_target(new_x, new_y, board)


class Queen(Piece):
    """A queen: a bishop's or a rook's move."""

    def __init__(self, x: int, y: int, color: int) -> None:
        super().__init__(x, y, color, 8, PieceType.QUEEN)

    def is_legal_move(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        delta_x = new_x - self.x
        delta_y = new_y - self.y
        diagonal = abs(delta_x) == abs(delta_y)
        if not diagonal and delta_x != 0 and delta_y != 0:
            return False
        if delta_x != 0 and delta_y != 0:
            if not _diagonal_path_clear(self, new_x, new_y, board):
                return False
            return self._claim_target(new_x, new_y, board)
        if not diagonal:
            return self._claim_target(new_x, new_y, board)
        return False


class King(Piece):
    """A king: a single step."""

    def __init__(self, x: int, y: int, color: int, can_castle: bool = True) -> None:
        super().__init__(x, y, color, 1, PieceType.KING)
        self.can_castle = can_castle

    def is_legal_move(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        if abs(new_x - self.x) > self.movements:
            return False
        if board.get_square(new_x, new_y) is None:
            return True
        if new_x == self.x and new_y == self.y:
            return False
        return self._claim_target(new_x, new_y, board)