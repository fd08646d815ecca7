from typing import List, Optional

from connect4_engine.config import WIDTH, HEIGHT, COLUMN_STRIDE
from connect4_engine.game.primitives import Color, Move
from connect4_engine.game.representation import Representation

# First free bit of each column on an empty board
BOTTOMS = tuple(col * COLUMN_STRIDE for col in range(WIDTH))
# Guard bit of each column: a column is full once its counter reaches it
TOPS = tuple(HEIGHT + col * COLUMN_STRIDE for col in range(WIDTH))   # 6, 13, 20, ... 48

# Shift distances between neighbouring cells
VERTICAL = 1
HORIZONTAL = COLUMN_STRIDE
DIAGONAL = COLUMN_STRIDE + 1
ANTI_DIAGONAL = COLUMN_STRIDE - 1


class Bitboard(Representation):
    """
    Packed-bitmask Connect Four board.

    One int mask per side. Cell (col, row) is bit `row + col * 7`; the top bit
    of every 7-bit column lane is never set, so shifted masks cannot carry a
    run from one column into the next.
    """

    def __init__(self):
        self.turn = Color.RED
        self.red = 0
        self.yellow = 0
        self.empties = list(BOTTOMS)

    def __repr__(self):
        return f"Bitboard(turn={self.turn}, red={self.red:#x}, yellow={self.yellow:#x})"

    def __eq__(self, other):
        if not isinstance(other, Bitboard):
            return NotImplemented
        return (
            self.turn is other.turn
            and self.red == other.red
            and self.yellow == other.yellow
            and self.empties == other.empties
        )

    @classmethod
    def empty(cls) -> 'Bitboard':
        return cls()

    def apply_move(self, mv: Move) -> None:
        index = self.empties[mv.col]
        if index >= TOPS[mv.col]:
            raise ValueError(f"Column {mv.col} is full")
        if self.turn is Color.RED:
            self.red ^= 1 << index
        else:
            self.yellow ^= 1 << index
        self.empties[mv.col] = index + 1
        self.turn = ~self.turn

    def undo_move(self, mv: Move) -> None:
        index = self.empties[mv.col] - 1
        if index < BOTTOMS[mv.col]:
            raise ValueError(f"Column {mv.col} is empty")
        self.turn = ~self.turn
        self.empties[mv.col] = index
        if self.turn is Color.RED:
            self.red ^= 1 << index
        else:
            self.yellow ^= 1 << index

    def fingerprint(self) -> int:
        # Occupancy only: does not say which side owns a cell
        return self.red ^ self.yellow

    def legal_moves(self) -> List[Move]:
        return [Move(col) for col in range(WIDTH) if self.empties[col] < TOPS[col]]

    def cell(self, col: int, row: int) -> Optional[Color]:
        bit = 1 << (row + col * COLUMN_STRIDE)
        if self.red & bit:
            return Color.RED
        if self.yellow & bit:
            return Color.YELLOW
        return None

    def height(self, col: int) -> int:
        return self.empties[col] - BOTTOMS[col]

    def is_terminal(self) -> bool:
        mask = self.red if self.turn is Color.RED else self.yellow
        for shift in (ANTI_DIAGONAL, DIAGONAL, HORIZONTAL, VERTICAL):
            if mask & (mask >> shift) & (mask >> 2 * shift) & (mask >> 3 * shift):
                return True
        return False
