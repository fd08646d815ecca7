"""
Unit tests for the board encodings.

Tests verify:
1. Notation parsing and rendering
2. apply_move / undo_move are exact inverses
3. Fingerprints are stable and occupancy-only
4. Legal moves respect column height
5. Both encodings agree on every position (including win detection)
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_engine.config import WIDTH, HEIGHT
from connect4_engine.game import (
    Bitboard, Color, Move, PieceList, UnrecognizedMoveError, parse,
)

REPRESENTATIONS = [PieceList, Bitboard]

POSITIONS = [
    "",
    "4",
    "722335",
    "1471116462531526523152622637576544",
    "455155137133342477531351477744",
    "61134124344226244271352657663",
]


class TestPrimitives:
    """Test Color and Move."""

    def test_color_magnitude_and_flip(self):
        assert Color.RED.magnitude == 1
        assert Color.YELLOW.magnitude == -1
        assert ~Color.RED is Color.YELLOW
        assert ~Color.YELLOW is Color.RED
        assert Color.RED.opponent is Color.YELLOW

    def test_parse_digits(self):
        assert [Move.parse(ch).col for ch in "1234567"] == list(range(WIDTH))
        assert Move.parse('3').notation == '3'

    @pytest.mark.parametrize("ch", ['0', '8', '9', 'a', ' ', '', '12'])
    def test_parse_rejects(self, ch):
        with pytest.raises(UnrecognizedMoveError, match="unrecognized move"):
            Move.parse(ch)

    def test_unrecognized_move_is_value_error(self):
        assert issubclass(UnrecognizedMoveError, ValueError)


@pytest.mark.parametrize("rep", REPRESENTATIONS)
class TestRepresentation:
    """Contract tests, run against both encodings."""

    def test_empty(self, rep):
        board = rep.empty()
        assert board.turn is Color.RED
        assert board.fingerprint() == 0
        assert board.legal_moves() == [Move(col) for col in range(WIDTH)]
        assert not board.is_terminal()
        assert board.move_count() == 0

    def test_parse_stops_at_bad_character(self, rep):
        with pytest.raises(UnrecognizedMoveError):
            parse(rep, "1238")

    def test_apply_move_stacks_pieces(self, rep):
        board = parse(rep, "444")
        assert board.height(3) == 3
        assert board.cell(3, 0) is Color.RED
        assert board.cell(3, 1) is Color.YELLOW
        assert board.cell(3, 2) is Color.RED
        assert board.cell(3, 3) is None
        assert board.turn is Color.YELLOW

    @pytest.mark.parametrize("notation", POSITIONS)
    def test_apply_undo_inverse(self, rep, notation):
        """apply followed by undo restores the full board, not just the fingerprint."""
        board = parse(rep, notation)
        before = board.copy()
        for mv in board.legal_moves():
            board.apply_move(mv)
            assert board != before
            board.undo_move(mv)
            assert board == before
            assert board.fingerprint() == before.fingerprint()

    def test_undo_back_to_empty(self, rep):
        notation = "722335"
        board = parse(rep, notation)
        for ch in reversed(notation):
            board.undo_move(Move.parse(ch))
        assert board == rep.empty()
        assert board.fingerprint() == 0

    def test_fingerprint_stable(self, rep):
        notation = "1471116462531526523152622637576544"
        assert parse(rep, notation).fingerprint() == parse(rep, notation).fingerprint()

    def test_fingerprint_revisits(self, rep):
        """Undoing to an earlier position reproduces its fingerprint."""
        board = parse(rep, "7223")
        seen = board.fingerprint()
        for ch in "35461":
            board.apply_move(Move.parse(ch))
        for ch in reversed("35461"):
            board.undo_move(Move.parse(ch))
        assert board.fingerprint() == seen

    def test_fingerprint_is_occupancy_only(self, rep):
        """Same cells filled by different owners share a fingerprint."""
        assert parse(rep, "12").fingerprint() == parse(rep, "21").fingerprint()
        assert parse(rep, "1").fingerprint() != parse(rep, "2").fingerprint()
        assert parse(rep, "11").fingerprint() != parse(rep, "12").fingerprint()

    def test_full_column_not_legal(self, rep):
        board = parse(rep, "11111")
        assert Move(0) in board.legal_moves()
        board.apply_move(Move(0))
        assert board.height(0) == HEIGHT
        assert Move(0) not in board.legal_moves()
        assert len(board.legal_moves()) == WIDTH - 1
        board.undo_move(Move(0))
        assert Move(0) in board.legal_moves()

    def test_apply_to_full_column_raises(self, rep):
        board = parse(rep, "111111")
        before = board.copy()
        with pytest.raises(ValueError):
            board.apply_move(Move(0))
        assert board == before

    def test_undo_empty_column_raises(self, rep):
        board = parse(rep, "1")
        with pytest.raises(ValueError):
            board.undo_move(Move(1))

    def test_copy_is_independent(self, rep):
        board = parse(rep, "4")
        clone = board.copy()
        clone.apply_move(Move(3))
        assert board.height(3) == 1
        assert clone.height(3) == 2

    def test_render(self, rep):
        board = parse(rep, "12")
        blank = " " * WIDTH
        expected = "\n".join([blank] * (HEIGHT - 1) + ["RY     ", "-" * WIDTH, "Turn: R"]) + "\n"
        assert board.render() == expected
        assert str(board) == expected

    def test_to_array(self, rep):
        state = parse(rep, "44").to_array()
        assert state.shape == (HEIGHT, WIDTH)
        assert state[HEIGHT - 1, 3] == 1
        assert state[HEIGHT - 2, 3] == -1
        assert np.count_nonzero(state) == 2


@pytest.mark.parametrize("rep", REPRESENTATIONS)
class TestTerminal:
    """
    is_terminal only looks at the pieces of the side to move.

    A four is therefore reported one move after it is completed, once the
    turn has come back to its owner.
    """

    @pytest.mark.parametrize("notation,reply", [
        ("1212121", "3"),           # red vertical
        ("1122334", "7"),           # red horizontal
        ("12233434474", "7"),       # red diagonal
        ("76655454414", "1"),       # red anti-diagonal
    ])
    def test_red_four(self, rep, notation, reply):
        board = parse(rep, notation)
        assert board.turn is Color.YELLOW
        assert not board.is_terminal()
        board.apply_move(Move.parse(reply))
        assert board.turn is Color.RED
        assert board.is_terminal()

    def test_yellow_vertical_four(self, rep):
        board = parse(rep, "12123212")
        assert board.turn is Color.RED
        assert not board.is_terminal()
        board.apply_move(Move(4))
        assert board.is_terminal()

    def test_no_wrap_across_columns(self, rep):
        """Top of column 0 and bottom of column 1 are not connected."""
        board = parse(rep, "217171161615")
        assert board.turn is Color.RED
        assert [board.cell(0, row) for row in range(3, HEIGHT)] == [Color.RED] * 3
        assert board.cell(1, 0) is Color.RED
        assert not board.is_terminal()


class TestEquivalence:
    """Both encodings must describe the same position after the same moves."""

    @staticmethod
    def assert_same(piece_list, bitboard):
        assert piece_list.turn is bitboard.turn
        assert piece_list.is_terminal() == bitboard.is_terminal()
        assert piece_list.legal_moves() == bitboard.legal_moves()
        assert piece_list.render() == bitboard.render()
        assert np.array_equal(piece_list.to_array(), bitboard.to_array())
        for col in range(WIDTH):
            assert piece_list.height(col) == bitboard.height(col)

    @pytest.mark.parametrize("notation", POSITIONS)
    def test_fixed_positions(self, notation):
        self.assert_same(parse(PieceList, notation), parse(Bitboard, notation))

    def test_random_games(self):
        rng = np.random.default_rng(7)
        for _ in range(200):
            piece_list = PieceList.empty()
            bitboard = Bitboard.empty()
            while True:
                self.assert_same(piece_list, bitboard)
                moves = piece_list.legal_moves()
                if not moves or piece_list.is_terminal():
                    break
                mv = moves[rng.integers(len(moves))]
                piece_list.apply_move(mv)
                bitboard.apply_move(mv)
