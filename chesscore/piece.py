"""Shared definitions for chess pieces: teams, piece kinds and the base piece."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Optional, Protocol

BOARD_X = 8
BOARD_Y = 8


class Team(IntEnum):
    """The side a piece plays for."""

    BLACK = 0
    WHITE = 1


class PieceType(Enum):
    """The kind of a chess piece."""

    PAWN = 0
    BISHOP = 1
    KNIGHT = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    EMPTY = 6


class BoardLike(Protocol):
    """Anything that can report which piece stands on a square."""

    def get_square(self, x: int, y: int) -> Optional["Piece"]:
        ...


class Piece(ABC):
    """A piece standing on the board at (x, y)."""

    def __init__(
        self,
        x: int,
        y: int,
        color: int,
        movements: int,
        kind: PieceType,
        alive: bool = True,
    ) -> None:
        self.x = x
        self.y = y
        self.color = Team(color)
        self.movements = movements
        self.kind = kind
        self.alive = alive

    @abstractmethod
    def is_legal_move(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        """Tell whether moving to (new_x, new_y) is allowed on ``board``."""

    def move(self, new_x: int, new_y: int) -> None:
        """Place the piece on (new_x, new_y)."""
        self.x = new_x
        self.y = new_y

    def eat(self, enemy: "Piece") -> None:
        """Capture ``enemy``."""
        enemy.die()

    def die(self) -> None:
        """Take the piece out of play."""
        self.alive = False

    def _claim_target(self, new_x: int, new_y: int, board: BoardLike) -> bool:
        """Accept an empty target, refuse a friendly one, capture an enemy one."""
        target = board.get_square(new_x, new_y)
        if target is None:
            return True
        if target.color == self.color:
            return False
        target.die()
        return True

    def __repr__(self) -> str:
        state = "" if self.alive else ", dead"
        return (
            f"{type(self).__name__}({self.x}, {self.y}, "
            f"{self.color.name}{state})"
        )