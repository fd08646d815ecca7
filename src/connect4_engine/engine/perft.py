from typing import Dict, Optional

from connect4_engine.game.primitives import Move
from connect4_engine.game.representation import Representation


def perft(board: Representation, depth: Optional[int] = None) -> int:
    """Node count: this position plus every continuation up to `depth` moves.

    Terminal positions count once and are not expanded. `depth=None` walks
    the whole remaining game tree.
    """
    nodes = 1
    if depth == 0 or board.is_terminal():
        return nodes
    child_depth = None if depth is None else depth - 1
    for mv in board.legal_moves():
        board.apply_move(mv)
        nodes += perft(board, child_depth)
        board.undo_move(mv)
    return nodes


def perft_divide(board: Representation, depth: Optional[int] = None) -> Dict[Move, int]:
    """Divide perft: nodes below each root move."""
    out: Dict[Move, int] = {}
    child_depth = None if depth is None else depth - 1
    for mv in board.legal_moves():
        board.apply_move(mv)
        out[mv] = perft(board, child_depth)
        board.undo_move(mv)
    return out
