"""Game setup: show the board and ask how many people play."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence, TextIO

from chesscore.board import Board

PROMPT = "Enter number of players: "


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class GameManager:
    """Runs a game read from ``input_stream`` and written to ``output_stream``."""

    def __init__(
        self,
        players: int = 0,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ) -> None:
        self.players = players
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.board: Optional[Board] = None

    def run(self) -> int:
        """Show a fresh board, ask for one or two players and return the choice.

        Raises EOFError if the input ends before a valid answer is given.
        """
        source = sys.stdin if self.input_stream is None else self.input_stream
        out = sys.stdout if self.output_stream is None else self.output_stream
        self.board = Board()
        self.board.print_board(out)
        tokens = _tokens(source)
        while True:
            out.write(PROMPT)
            out.flush()
            token = next(tokens, None)
            if token is None:
                raise EOFError("input ended before the number of players was given")
            try:
                self.players = int(token)
            except ValueError:
                self.players = 0
            out.write("\n")
            if 1 <= self.players <= 2:
                return self.players


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a game on the terminal."""
    parser = argparse.ArgumentParser(prog="chesscore", description="Play chess.")
    parser.parse_args(argv)
    try:
        GameManager().run()
    except EOFError as error:
        print(error, file=sys.stderr)
        return 1
    return 0