"""
Zobrist keys for Connect4 board fingerprints.

The dense-grid board keeps a running fingerprint: the XOR of one random key per
occupied cell. Placing or removing a piece XORs the same key, so the update is
O(1) and undo needs no stored history.

Implementation:
- Pre-generate one random key per (col, row) cell
- Fingerprint = XOR of the keys of all occupied cells
- Keys do not depend on which side owns the cell, nor on the side to move
"""

from typing import Optional

import numpy as np

from connect4_engine.config import WIDTH, HEIGHT, ZOBRIST_CONFIG


class ZobristHasher:
    """
    Read-only table of per-cell keys.

    Connect4 board: 7 columns × 6 rows = 42 keys
    """

    def __init__(self, column_count: int = WIDTH, row_count: int = HEIGHT,
                 seed: int = ZOBRIST_CONFIG['seed']):
        """
        Args:
            column_count: Number of columns
            row_count: Number of rows
            seed: Random seed, fixed so fingerprints are reproducible
        """
        self.column_count = column_count
        self.row_count = row_count

        rng = np.random.RandomState(seed)
        table = rng.randint(
            1, 2**63 - 1,
            size=(column_count, row_count),
            dtype=np.uint64
        )

        # Plain ints: XOR on Python ints is faster than on numpy scalars
        self.keys = tuple(
            tuple(int(key) for key in column) for column in table
        )

    def key(self, col: int, row: int) -> int:
        return self.keys[col][row]

    def hash_position(self, board) -> int:
        """
        Recompute a fingerprint from scratch by XOR-ing every occupied cell.

        Args:
            board: Any Representation

        Returns:
            64-bit fingerprint (int)
        """
        value = 0
        for col in range(self.column_count):
            for row in range(board.height(col)):
                value ^= self.keys[col][row]
        return value


# Global singleton instance
_global_hasher: Optional[ZobristHasher] = None


def get_zobrist_hasher() -> ZobristHasher:
    """
    Get or create the process-wide key table.

    All boards must share one table, otherwise equal positions would not
    produce equal fingerprints.
    """
    global _global_hasher

    if _global_hasher is None:
        _global_hasher = ZobristHasher()

    return _global_hasher
