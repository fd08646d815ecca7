"""
Negamax and alpha-beta search for Connect4.

All functions work against the Representation contract only, so they run
unchanged on either board encoding. The board is mutated in place along each
branch and restored on the way back:

    for move in board.legal_moves():
        board.apply_move(move)
        score = -child(board, depth - 1)
        board.undo_move(move)

There is no transposition table and no move ordering: moves are tried in
ascending column order and every call recomputes from scratch.

Scores are in [-WIN_SCORE, WIN_SCORE] from the perspective of the side the
`color` (or the board's turn) refers to.
"""

import logging
from typing import Tuple

from connect4_engine.config import WIN_SCORE
from connect4_engine.game.primitives import Move
from connect4_engine.game.representation import Representation

logger = logging.getLogger(__name__)

# Window handed to each root child: (alpha, beta) = (WIN_SCORE, -WIN_SCORE)
ROOT_ALPHA = WIN_SCORE
ROOT_BETA = -WIN_SCORE


def evaluate(board: Representation) -> int:
    """Static evaluation placeholder: every position is neutral."""
    return 0


def negamax(board: Representation, depth: int) -> int:
    """
    Plain negamax to a fixed depth.

    Args:
        board: Position to search (restored before returning)
        depth: Remaining plies

    Returns:
        Score from the side to move's perspective
    """
    mag = board.turn.magnitude
    if board.is_terminal():
        return mag * WIN_SCORE
    if depth == 0:
        return mag * evaluate(board)

    value = -WIN_SCORE
    for mv in board.legal_moves():
        board.apply_move(mv)
        value = max(value, -negamax(board, depth - 1))
        board.undo_move(mv)
    return value


def alphabeta(board: Representation, depth: int, alpha: int, beta: int, color: int) -> int:
    """
    Fail-soft alpha-beta negamax.

    A result outside the open window (alpha, beta) is only a bound on the true
    value.

    Args:
        board: Position to search (restored before returning)
        depth: Remaining plies
        alpha: Lower bound
        beta: Upper bound
        color: +1 or -1, sign applied to terminal and static scores

    Returns:
        Score from `color`'s perspective
    """
    if board.is_terminal():
        return color * WIN_SCORE
    if depth == 0:
        return color * evaluate(board)

    value = -WIN_SCORE
    for mv in board.legal_moves():
        board.apply_move(mv)
        value = max(value, -alphabeta(board, depth - 1, -beta, -alpha, -color))
        alpha = max(alpha, value)
        board.undo_move(mv)
        if alpha >= beta:
            break
    return value


def search(board: Representation, depth: int) -> Tuple[Move, int]:
    """
    Pick a move for the side to move.

    Every legal move is scored with alphabeta at depth - 1; ties go to the
    higher column.

    Args:
        board: Non-terminal position (restored before returning)
        depth: Search depth in plies, at least 1

    Returns:
        (best_move, score) with the score from the mover's perspective
    """
    assert not board.is_terminal(), "search called on a terminal position"
    assert depth >= 1, "search depth must be at least 1"

    best_move = Move(0)
    best_value = -WIN_SCORE
    for mv in board.legal_moves():
        board.apply_move(mv)
        value = -alphabeta(board, depth - 1, ROOT_ALPHA, ROOT_BETA, board.turn.magnitude)
        board.undo_move(mv)
        logger.debug("move %s scored %d", mv, value)
        if value >= best_value:
            best_value = value
            best_move = mv

    logger.info("depth %d: best move %s (%d)", depth, best_move, best_value)
    return best_move, best_value
