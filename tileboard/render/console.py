"""
Plain text actuator.
"""

import sys
from typing import TextIO

from tileboard.core import Grid

from .actuator import Actuator, GameMetadata, message_for


def format_board(grid: Grid) -> str:
    """Board as tab separated rows, top row first, empty cells as dots."""
    return '\n'.join(' \t'.join(str(value) if value else '.' for value in row) for row in grid.to_array().tolist())


class ConsoleActuator(Actuator):
    """
    Print the board, the score and the end-of-game message to a text stream.

    Parameters
    ----------
    stream : TextIO, optional
        Where to write, standard output by default.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self.score = 0

    def actuate(self, grid: Grid, metadata: GameMetadata) -> None:
        self.score = metadata.score
        print(f'Score: {self.score}', file=self.stream)
        print(format_board(grid), file=self.stream)

        message = message_for(metadata)
        if message is not None:
            print(message, file=self.stream)
        self.stream.flush()

    def clear_score(self) -> None:
        self.score = 0

    def show_text(self, text: str) -> None:
        print(text, file=self.stream)
        self.stream.flush()
