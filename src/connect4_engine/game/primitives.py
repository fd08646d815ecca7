"""
Side-to-move tag and column move for Connect Four.
"""

from dataclasses import dataclass
from enum import Enum

from connect4_engine.config import WIDTH


class UnrecognizedMoveError(ValueError):
    """Raised when a notation character does not name a column."""


class Color(Enum):
    """
    The two sides. RED always moves first.

    The value is the side's magnitude: +1 for RED, -1 for YELLOW. Negamax
    multiplies scores by it to fold both players into one sign.
    """
    RED = 1
    YELLOW = -1

    @property
    def magnitude(self) -> int:
        return self.value

    @property
    def opponent(self) -> 'Color':
        return Color.YELLOW if self is Color.RED else Color.RED

    def __invert__(self) -> 'Color':
        return self.opponent

    def __str__(self):
        return 'R' if self is Color.RED else 'Y'


@dataclass(frozen=True, order=True)
class Move:
    """A drop into column `col` (0-based)."""
    col: int

    @classmethod
    def parse(cls, ch: str) -> 'Move':
        """
        Parse one notation character: '1'..'7' map to columns 0..6.

        Raises:
            UnrecognizedMoveError: for any other character
        """
        if len(ch) == 1 and '1' <= ch <= str(WIDTH):
            return cls(int(ch) - 1)
        raise UnrecognizedMoveError(f"unrecognized move: {ch!r}")

    @property
    def notation(self) -> str:
        return str(self.col + 1)

    def __str__(self):
        return self.notation
