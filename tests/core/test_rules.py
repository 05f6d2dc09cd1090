"""Tests for Rules: legality filtering, checkmate, stalemate."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, GameStatus
from chessrules.core.errors import NoKing
from chessrules.core.move_generator import pseudo_legal_moves
from chessrules.core.position import Position
from chessrules.core.rules import Rules


def sq(name: str) -> Position:
    return Position.parse(name)


def squares(*names: str) -> frozenset[Position]:
    return frozenset(sq(n) for n in names)


class TestCheck:
    def test_starting_not_in_check(self, initial_board: Board) -> None:
        assert not Rules.is_in_check(initial_board, Color.WHITE)
        assert Rules.status(initial_board, Color.WHITE) == GameStatus.NORMAL

    def test_rook_on_open_file(self) -> None:
        # White king alone against a rook on its file: check, not mate.
        board = Board.from_pieces({"e1": "K", "e8": "r", "a8": "k"})
        assert Rules.is_in_check(board, Color.WHITE)
        assert Rules.legal_moves(board, sq("e1")) == squares("d1", "d2", "f1", "f2")
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECK


class TestPins:
    def test_pinned_bishop_cannot_move(self) -> None:
        board = Board.from_pieces({"e1": "K", "c1": "B", "a1": "r", "h8": "k"})
        assert pseudo_legal_moves(board, sq("c1"))
        assert Rules.legal_moves(board, sq("c1")) == frozenset()

    def test_pinned_rook_moves_along_pin(self) -> None:
        board = Board.from_pieces({"e1": "K", "e4": "R", "e8": "r", "a8": "k"})
        assert sq("a4") in pseudo_legal_moves(board, sq("e4"))
        assert Rules.legal_moves(board, sq("e4")) == squares(
            "e2", "e3", "e5", "e6", "e7", "e8"
        )

    def test_unpinned_piece_moves_freely(self) -> None:
        board = Board.from_pieces({"e1": "K", "c1": "B", "a2": "r", "h8": "k"})
        assert Rules.legal_moves(board, sq("c1")) == pseudo_legal_moves(board, sq("c1"))


class TestKingSafety:
    def test_king_cannot_capture_defended_piece(self) -> None:
        board = Board.from_pieces({"e1": "K", "e2": "q", "e8": "r", "a8": "k"})
        assert sq("e2") in pseudo_legal_moves(board, sq("e1"))
        assert Rules.legal_moves(board, sq("e1")) == frozenset()
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECKMATE

    def test_king_captures_undefended_checker(self) -> None:
        board = Board.from_pieces({"e1": "K", "e2": "q", "a8": "k"})
        assert Rules.legal_moves(board, sq("e1")) == squares("e2")
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECK

    def test_kings_keep_their_distance(self) -> None:
        board = Board.from_pieces({"e4": "K", "e6": "k"})
        assert Rules.legal_moves(board, sq("e4")) == squares("d3", "e3", "f3", "d4", "f4")

    def test_king_cannot_retreat_along_checking_ray(self) -> None:
        board = Board.from_pieces({"d1": "K", "a1": "r", "h8": "k"})
        assert sq("e1") not in Rules.legal_moves(board, sq("d1"))

    def test_double_check_only_king_moves(self) -> None:
        board = Board.from_pieces({"e8": "k", "g5": "n", "e1": "R", "b5": "B", "a1": "K"})
        assert Rules.status(board, Color.BLACK) == GameStatus.CHECK
        assert {sq("e4"), sq("e6")} <= pseudo_legal_moves(board, sq("g5"))
        assert Rules.legal_moves(board, sq("g5")) == frozenset()
        assert Rules.legal_moves(board, sq("e8")) == squares("d8", "f8", "f7")

    def test_block_or_capture_single_check(self) -> None:
        board = Board.from_pieces({"e1": "K", "e8": "r", "a8": "k", "d3": "N", "a4": "R"})
        assert Rules.legal_moves(board, sq("a4")) == squares("e4")
        assert Rules.legal_moves(board, sq("d3")) == squares("e5")


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = Board.initial()
        for src, dst in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            board = board.moved(sq(src), sq(dst))
        assert Rules.is_checkmate(board, Color.WHITE)
        assert not Rules.has_legal_move(board, Color.WHITE)

    def test_back_rank_mate(self) -> None:
        board = Board.from_pieces(
            {"g1": "K", "f2": "P", "g2": "P", "h2": "P", "a1": "r", "g8": "k"}
        )
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECKMATE

    def test_back_rank_escape_hatch(self) -> None:
        board = Board.from_pieces(
            {"g1": "K", "f2": "P", "g2": "P", "h3": "P", "a1": "r", "g8": "k"}
        )
        assert Rules.legal_moves(board, sq("g1")) == squares("h2")
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECK


class TestStalemate:
    def test_king_in_corner(self) -> None:
        board = Board.from_pieces({"a1": "K", "c2": "k", "b3": "q"})
        assert Rules.is_stalemate(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.WHITE)

    def test_king_trapped_by_queen(self) -> None:
        board = Board.from_pieces({"h8": "k", "f6": "K", "g6": "Q"})
        assert Rules.status(board, Color.BLACK) == GameStatus.STALEMATE

    def test_not_stalemate_when_has_moves(self) -> None:
        board = Board.from_pieces({"h8": "k", "f6": "K"})
        assert Rules.status(board, Color.BLACK) == GameStatus.NORMAL

    def test_other_piece_breaks_stalemate(self) -> None:
        board = Board.from_pieces({"a1": "K", "c2": "k", "b3": "q", "h4": "P"})
        assert Rules.status(board, Color.WHITE) == GameStatus.NORMAL


class TestMissingKing:
    def test_simulation_without_own_king_keeps_moves(self) -> None:
        board = Board.from_pieces({"a1": "R", "h8": "k"})
        assert Rules.legal_moves(board, sq("a1")) == pseudo_legal_moves(board, sq("a1"))

    def test_status_requires_king(self) -> None:
        board = Board.from_pieces({"a1": "R", "h8": "k"})
        with pytest.raises(NoKing):
            Rules.status(board, Color.WHITE)


class TestAllLegalMoves:
    def test_initial_position(self, initial_board: Board) -> None:
        moves = Rules.all_legal_moves(initial_board, Color.WHITE)
        assert len(moves) == 10
        assert sum(len(d) for d in moves.values()) == 20
        assert moves[sq("b1")] == squares("a3", "c3")

    def test_does_not_mutate_board(self, initial_board: Board) -> None:
        before = initial_board.snapshot()
        Rules.all_legal_moves(initial_board, Color.BLACK)
        assert initial_board.snapshot() == before


class TestGameResult:
    @pytest.mark.parametrize(
        ("status", "side", "expected"),
        [
            (GameStatus.NORMAL, Color.WHITE, GameResult.IN_PROGRESS),
            (GameStatus.CHECK, Color.BLACK, GameResult.IN_PROGRESS),
            (GameStatus.CHECKMATE, Color.WHITE, GameResult.BLACK_WINS),
            (GameStatus.CHECKMATE, Color.BLACK, GameResult.WHITE_WINS),
            (GameStatus.STALEMATE, Color.WHITE, GameResult.DRAW),
        ],
    )
    def test_result_mapping(
        self, status: GameStatus, side: Color, expected: GameResult
    ) -> None:
        assert Rules.result(status, side) == expected
