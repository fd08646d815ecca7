"""
Command-line driver: search a position, count nodes, or play against the engine.

Examples:
    python play_connect4.py --notation 722335 --depth 11
    python play_connect4.py --representation bitboard --mode perft --depth 6
    python play_connect4.py --mode play --depth 8
"""

import argparse
import logging
from typing import Callable, Optional, Sequence

from tqdm import tqdm

from connect4_engine.config import SEARCH_CONFIG
from connect4_engine.engine.perft import perft
from connect4_engine.engine.search import negamax, search
from connect4_engine.game import REPRESENTATIONS, Move, Representation, UnrecognizedMoveError, parse

logger = logging.getLogger(__name__)


def run_search(board: Representation, depth: int):
    print(board)
    if board.is_terminal():
        print("Game Over")
        return None
    mv, value = search(board, depth)
    print(f"Move {mv} has evaluation {value}")
    return mv, value


def run_negamax(board: Representation, depth: int) -> int:
    print(board)
    value = negamax(board, depth)
    print(f"Negamax {value}")
    return value


def run_perft(board: Representation, depth: int) -> int:
    """Perft split by root move, with a progress bar over the root moves."""
    print(board)
    total = 1
    if board.is_terminal():
        print(f"Total: {total}")
        return total
    for mv in tqdm(board.legal_moves(), desc=f"Perft {depth}"):
        board.apply_move(mv)
        nodes = perft(board, depth - 1)
        board.undo_move(mv)
        tqdm.write(f"{mv}: {nodes}")
        total += nodes
    print(f"Total: {total}")
    return total


def play_loop(board: Representation, depth: int,
              read_line: Callable[[str], str] = input) -> Representation:
    """
    Interactive game: the user moves, the engine answers.

    Stops on a terminal position, on 'q', or at end of input.
    """
    while True:
        print(board)
        if board.is_terminal():
            print("Game Over")
            return board
        legal = board.legal_moves()
        if not legal:
            print("🤝 Game Over - Draw!")
            return board

        try:
            line = read_line("Enter column (1-7) or 'q' to quit: ").strip()
        except EOFError:
            return board
        if line.lower() == 'q':
            print("👋 Thanks for playing!")
            return board
        if not line:
            continue

        try:
            mv = Move.parse(line[0])
        except UnrecognizedMoveError as e:
            print(f"Error: {e}")
            continue
        if mv not in legal:
            print(f"Error: column {mv} is full")
            continue
        board.apply_move(mv)

        if board.is_terminal() or not board.legal_moves():
            continue
        print("🟡 Engine is thinking...")
        reply, value = search(board, depth)
        logger.info("engine plays %s (%d)", reply, value)
        print(f"Engine plays column {reply}")
        board.apply_move(reply)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Connect Four search engine")
    ap.add_argument('--notation', type=str, default=SEARCH_CONFIG['notation'],
                    help="moves from the empty board, one digit 1-7 per move")
    ap.add_argument('--depth', type=int, default=SEARCH_CONFIG['depth'])
    ap.add_argument('--representation', choices=sorted(REPRESENTATIONS),
                    default=SEARCH_CONFIG['representation'])
    ap.add_argument('--mode', choices=['search', 'negamax', 'perft', 'play'],
                    default=SEARCH_CONFIG['mode'])
    ap.add_argument('--verbose', action='store_true', help="log every root move")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.depth < 1:
        ap.error("--depth must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        board = parse(REPRESENTATIONS[args.representation], args.notation)
    except ValueError as e:
        ap.error(f"bad notation {args.notation!r}: {e}")

    if args.mode == 'search':
        run_search(board, args.depth)
    elif args.mode == 'negamax':
        run_negamax(board, args.depth)
    elif args.mode == 'perft':
        run_perft(board, args.depth)
    else:
        play_loop(board, args.depth)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
