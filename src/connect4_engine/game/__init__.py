"""
Connect Four board encodings.

- PieceList: dense per-cell grid with an incremental zobrist fingerprint
- Bitboard: one packed bitmask per side with shift-based win detection

Both implement Representation and must agree on every position reached by
the same move sequence.
"""

from connect4_engine.game.primitives import Color, Move, UnrecognizedMoveError
from connect4_engine.game.representation import Representation, parse
from connect4_engine.game.piece_list import PieceList
from connect4_engine.game.bitboard import Bitboard

REPRESENTATIONS = {
    'piece_list': PieceList,
    'bitboard': Bitboard,
}

__all__ = [
    'Color',
    'Move',
    'UnrecognizedMoveError',
    'Representation',
    'parse',
    'PieceList',
    'Bitboard',
    'REPRESENTATIONS',
]
