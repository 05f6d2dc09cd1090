"""Pseudo-legal move generation (movement and blocking, not king safety)."""

from __future__ import annotations

from collections.abc import Callable

from chessrules.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_DIRECTION,
    PAWN_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
)
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.position import Position

# Row each color's pawns start on, indexed by Color.
PAWN_START_ROWS: tuple[int, int] = (1, 6)


class MoveGenerator:
    """Generates pseudo-legal destinations for pieces on a :class:`Board`.

    The generator only reads the board; it never mutates it.
    """

    __slots__ = ("_board", "_dispatch")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._dispatch: dict[
            PieceType, Callable[[Position, Color, list[Position]], None]
        ] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.ROOK: self._gen_rook,
            PieceType.QUEEN: self._gen_queen,
            PieceType.KING: self._gen_king,
        }

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, from_pos: Position) -> frozenset[Position]:
        """Destinations of the piece on *from_pos*; empty if the square is empty."""
        piece = self._board[from_pos]
        if piece is None:
            return frozenset()
        moves: list[Position] = []
        self._dispatch[piece.piece_type](from_pos, piece.color, moves)
        return frozenset(moves)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Position, color: Color, moves: list[Position]) -> None:
        board = self._board
        step = PAWN_DIRECTION[color]

        one_row = sq.row + step
        if 0 <= one_row < 8:
            one_step = Position(one_row, sq.column)
            if board.is_empty(one_step):
                moves.append(one_step)
                if sq.row == PAWN_START_ROWS[color]:
                    two_step = Position(one_row + step, sq.column)
                    if board.is_empty(two_step):
                        moves.append(two_step)

        for cap_sq in PAWN_TARGETS[color][sq.index]:
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)

    def _gen_knight(self, sq: Position, color: Color, moves: list[Position]) -> None:
        self._gen_stepping(KNIGHT_TARGETS[sq.index], color, moves)

    def _gen_king(self, sq: Position, color: Color, moves: list[Position]) -> None:
        self._gen_stepping(KING_TARGETS[sq.index], color, moves)

    def _gen_bishop(self, sq: Position, color: Color, moves: list[Position]) -> None:
        self._gen_sliding(BISHOP_RAYS[sq.index], color, moves)

    def _gen_rook(self, sq: Position, color: Color, moves: list[Position]) -> None:
        self._gen_sliding(ROOK_RAYS[sq.index], color, moves)

    def _gen_queen(self, sq: Position, color: Color, moves: list[Position]) -> None:
        self._gen_sliding(QUEEN_RAYS[sq.index], color, moves)

    def _gen_stepping(
        self,
        targets: tuple[Position, ...],
        color: Color,
        moves: list[Position],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        rays: tuple[tuple[Position, ...], ...],
        color: Color,
        moves: list[Position],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break


def pseudo_legal_moves(board: Board, from_pos: Position) -> frozenset[Position]:
    """Shortcut for ``MoveGenerator(board).pseudo_legal_moves(from_pos)``."""
    return MoveGenerator(board).pseudo_legal_moves(from_pos)
