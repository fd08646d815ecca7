from typing import List, Optional

from connect4_engine.config import WIDTH, HEIGHT
from connect4_engine.engine.zobrist import get_zobrist_hasher
from connect4_engine.game.primitives import Color, Move
from connect4_engine.game.representation import Representation


class PieceList(Representation):
    """
    Dense-grid Connect Four board.

    Storage: squares[col][row] holding a Color or None (row 0 = bottom),
    empties[col] giving the next free row, and a running zobrist fingerprint.
    """

    def __init__(self):
        self.turn = Color.RED
        self.squares: List[List[Optional[Color]]] = [[None] * HEIGHT for _ in range(WIDTH)]
        self.empties = [0] * WIDTH
        self.zobrist = 0
        self._keys = get_zobrist_hasher().keys

    def __repr__(self):
        return f"PieceList(turn={self.turn}, empties={self.empties}, zobrist={self.zobrist:#018x})"

    def __eq__(self, other):
        if not isinstance(other, PieceList):
            return NotImplemented
        return (
            self.turn is other.turn
            and self.squares == other.squares
            and self.empties == other.empties
            and self.zobrist == other.zobrist
        )

    @classmethod
    def empty(cls) -> 'PieceList':
        return cls()

    def apply_move(self, mv: Move) -> None:
        col = mv.col
        row = self.empties[col]
        if row >= HEIGHT:
            raise ValueError(f"Column {col} is full")
        self.squares[col][row] = self.turn
        self.empties[col] = row + 1
        self.zobrist ^= self._keys[col][row]
        self.turn = ~self.turn

    def undo_move(self, mv: Move) -> None:
        col = mv.col
        row = self.empties[col] - 1
        if row < 0:
            raise ValueError(f"Column {col} is empty")
        self.squares[col][row] = None
        self.empties[col] = row
        self.zobrist ^= self._keys[col][row]
        self.turn = ~self.turn

    def fingerprint(self) -> int:
        return self.zobrist

    def legal_moves(self) -> List[Move]:
        return [Move(col) for col in range(WIDTH) if self.empties[col] < HEIGHT]

    def cell(self, col: int, row: int) -> Optional[Color]:
        return self.squares[col][row]

    def height(self, col: int) -> int:
        return self.empties[col]

    def is_terminal(self) -> bool:
        """
        Scan for four in a row belonging to the side to move.

        Each run is found from its lowest-indexed cell, so only the positive
        direction is checked (anti-diagonal walks towards lower columns).
        """
        squares = self.squares
        turn = self.turn
        for col in range(WIDTH):
            for row in range(HEIGHT):
                if squares[col][row] is not turn:
                    continue
                # horizontal
                if (col < WIDTH - 3
                        and squares[col + 1][row] is turn
                        and squares[col + 2][row] is turn
                        and squares[col + 3][row] is turn):
                    return True
                # vertical
                if (row < HEIGHT - 3
                        and squares[col][row + 1] is turn
                        and squares[col][row + 2] is turn
                        and squares[col][row + 3] is turn):
                    return True
                # diagonal
                if (col < WIDTH - 3 and row < HEIGHT - 3
                        and squares[col + 1][row + 1] is turn
                        and squares[col + 2][row + 2] is turn
                        and squares[col + 3][row + 3] is turn):
                    return True
                # anti-diagonal
                if (col > 2 and row < HEIGHT - 3
                        and squares[col - 1][row + 1] is turn
                        and squares[col - 2][row + 2] is turn
                        and squares[col - 3][row + 3] is turn):
                    return True
        return False
