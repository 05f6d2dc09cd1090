"""High-level chess rules: legality filtering, check, checkmate, stalemate."""

from __future__ import annotations

from chessrules.core.attacks import is_in_check
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, GameStatus
from chessrules.core.errors import NoKing
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every candidate move is tried on a fresh board from :meth:`Board.moved`,
    so the board passed in is never touched.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_in_check(board, color)

    @staticmethod
    def leaves_king_safe(board: Board, from_pos: Position, to_pos: Position) -> bool:
        """Would moving *from_pos* → *to_pos* keep the mover's king unattacked?"""
        piece = board[from_pos]
        if piece is None:
            return False
        simulated = board.moved(from_pos, to_pos)
        try:
            return not is_in_check(simulated, piece.color)
        except NoKing:
            # No king of the mover's color: nothing can be left in check.
            return True

    @staticmethod
    def legal_moves(board: Board, from_pos: Position) -> frozenset[Position]:
        """Pseudo-legal destinations of *from_pos* that do not expose its king."""
        candidates = MoveGenerator(board).pseudo_legal_moves(from_pos)
        return frozenset(
            to_pos
            for to_pos in candidates
            if Rules.leaves_king_safe(board, from_pos, to_pos)
        )

    @staticmethod
    def all_legal_moves(board: Board, color: Color) -> dict[Position, frozenset[Position]]:
        """Legal destinations per square for every *color* piece that can move."""
        moves: dict[Position, frozenset[Position]] = {}
        for pos, _piece in board.pieces_of(color):
            destinations = Rules.legal_moves(board, pos)
            if destinations:
                moves[pos] = destinations
        return moves

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        for pos, _piece in board.pieces_of(color):
            for to_pos in gen.pseudo_legal_moves(pos):
                if Rules.leaves_king_safe(board, pos, to_pos):
                    return True
        return False

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.status(board, color) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return Rules.status(board, color) == GameStatus.STALEMATE

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Classify the position for *color* to move. Raises ``NoKing``."""
        in_check = is_in_check(board, color)
        if Rules.has_legal_move(board, color):
            return GameStatus.CHECK if in_check else GameStatus.NORMAL
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

    @staticmethod
    def result(status: GameStatus, side_to_move: Color) -> GameResult:
        """Game result implied by *status* with *side_to_move* on move."""
        if status == GameStatus.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if status == GameStatus.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
