from abc import ABC, abstractmethod
import copy
from typing import List, Optional, Type, TypeVar

import numpy as np

from connect4_engine.config import WIDTH, HEIGHT
from connect4_engine.game.primitives import Color, Move

R = TypeVar('R', bound='Representation')


class Representation(ABC):
    """
    Abstract Base Class for a Connect Four board encoding.

    Boards are mutated in place: apply_move/undo_move form a stack, and
    undo_move must only ever be called with the most recently applied move.
    Implementations keep the side to move in a `turn` attribute.
    """

    turn: Color

    @classmethod
    @abstractmethod
    def empty(cls: Type[R]) -> R:
        """
        Returns a board with no pieces and RED to move.
        """
        pass

    @abstractmethod
    def apply_move(self, mv: Move) -> None:
        """
        Drops a piece of the side to move into column mv.col and flips the turn.
        """
        pass

    @abstractmethod
    def undo_move(self, mv: Move) -> None:
        """
        Exact inverse of apply_move for the most recently applied move.
        """
        pass

    @abstractmethod
    def fingerprint(self) -> int:
        """
        Returns an O(1) occupancy key. Does not encode whose turn it is.
        """
        pass

    @abstractmethod
    def legal_moves(self) -> List[Move]:
        """
        Returns every non-full column in increasing column order.
        """
        pass

    @abstractmethod
    def is_terminal(self) -> bool:
        """
        Returns True if the side to move already has four connected pieces.
        """
        pass

    @abstractmethod
    def cell(self, col: int, row: int) -> Optional[Color]:
        """
        Returns the color occupying (col, row), row 0 being the bottom.
        """
        pass

    @abstractmethod
    def height(self, col: int) -> int:
        """
        Returns the number of pieces in a column.
        """
        pass

    def move_count(self) -> int:
        return sum(self.height(col) for col in range(WIDTH))

    def copy(self: R) -> R:
        return copy.deepcopy(self)

    def to_array(self) -> np.ndarray:
        """
        Board as a (HEIGHT, WIDTH) array, row 0 at the top.
        RED = 1, YELLOW = -1, empty = 0.
        """
        state = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        for col in range(WIDTH):
            for row in range(self.height(col)):
                state[HEIGHT - 1 - row, col] = self.cell(col, row).magnitude
        return state

    def render(self) -> str:
        lines = []
        for row in range(HEIGHT - 1, -1, -1):
            line = ''
            for col in range(WIDTH):
                color = self.cell(col, row)
                line += ' ' if color is None else str(color)
            lines.append(line)
        lines.append('-' * WIDTH)
        lines.append(f"Turn: {self.turn}")
        return '\n'.join(lines) + '\n'

    def __str__(self):
        return self.render()


def parse(representation: Type[R], notation: str) -> R:
    """
    Replay a notation string such as "722335" from the empty board.

    Args:
        representation: Board class to build
        notation: One digit '1'..'7' per move

    Returns:
        The resulting board

    Raises:
        UnrecognizedMoveError: on the first character that is not a column
    """
    board = representation.empty()
    for ch in notation:
        board.apply_move(Move.parse(ch))
    return board
