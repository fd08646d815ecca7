"""
Search engine for Connect4.

This module contains the engine components:
- Zobrist keys for the dense-grid fingerprint
- Negamax and fail-soft alpha-beta search with a root move picker
- Perft node counting, used to cross-check the board encodings
"""

from connect4_engine.engine.zobrist import ZobristHasher, get_zobrist_hasher
from connect4_engine.engine.search import evaluate, negamax, alphabeta, search
from connect4_engine.engine.perft import perft, perft_divide

__all__ = [
    'ZobristHasher',
    'get_zobrist_hasher',
    'evaluate',
    'negamax',
    'alphabeta',
    'search',
    'perft',
    'perft_divide',
]
