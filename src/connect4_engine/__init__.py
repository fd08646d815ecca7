"""
Connect Four board encodings and game-tree search.

- game: Color/Move primitives, the Representation contract, PieceList and Bitboard
- engine: zobrist keys, negamax / alpha-beta search, perft
- play: command-line driver
"""

from connect4_engine.game import (
    Color, Move, UnrecognizedMoveError, Representation, parse, PieceList, Bitboard,
    REPRESENTATIONS,
)
from connect4_engine.engine import evaluate, negamax, alphabeta, search, perft, perft_divide

__all__ = [
    'Color', 'Move', 'UnrecognizedMoveError',
    'Representation', 'parse', 'PieceList', 'Bitboard', 'REPRESENTATIONS',
    'evaluate', 'negamax', 'alphabeta', 'search',
    'perft', 'perft_divide',
]
