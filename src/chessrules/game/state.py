"""Game state machine: board ownership, turn order and status transitions."""

from __future__ import annotations

import logging

from chessrules.core.attacks import is_in_check
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, GameStatus
from chessrules.core.errors import (
    GameOver,
    IllegalMove,
    InvalidBoard,
    NoPieceAtSquare,
    NotYourTurn,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


class Game:
    """A single game: the live board, the side to move and its status.

    The game owns its board exclusively. Callers receive copies or
    snapshots, and the only mutation is :meth:`apply_move`, which swaps in
    the new board, turn and status together once every check has passed.
    """

    __slots__ = ("_board", "_turn", "_status")

    def __init__(self, board: Board | None = None, turn: Color = Color.WHITE) -> None:
        """Start from *board* (standard position when omitted) with *turn* to move.

        Both kings must be on the board, and the side not on move must not
        be in check: raises ``NoKing`` or ``InvalidBoard`` otherwise.
        """
        self._board = board.copy() if board is not None else Board.initial()
        self._turn = turn
        if is_in_check(self._board, turn.opposite):
            raise InvalidBoard(f"{turn.opposite.name} is in check with {turn} to move")
        self._status = Rules.status(self._board, turn)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """Independent copy of the live board."""
        return self._board.copy()

    def snapshot(self) -> tuple[Piece | None, ...]:
        return self._board.snapshot()

    def piece_at(self, pos: Position | str) -> Piece | None:
        return self._board[Position.coerce(pos)]

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def in_check(self) -> bool:
        return self._status in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def result(self) -> GameResult:
        return Rules.result(self._status, self._turn)

    def legal_moves(self, from_pos: Position | str) -> frozenset[Position]:
        """Legal destinations for the side-to-move piece on *from_pos*."""
        pos = Position.coerce(from_pos)
        piece = self._board[pos]
        if piece is None:
            raise NoPieceAtSquare(f"No piece on {pos}")
        if piece.color != self._turn:
            raise NotYourTurn(f"{piece.color.name} piece on {pos}, {self._turn} to move")
        return Rules.legal_moves(self._board, pos)

    def all_legal_moves(self) -> dict[Position, frozenset[Position]]:
        """Legal destinations for every piece of the side to move."""
        return Rules.all_legal_moves(self._board, self._turn)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_pos: Position | str, to_pos: Position | str) -> GameStatus:
        """Move a piece and return the status of the new side to move.

        Raises ``GameOver``, ``InvalidPosition``, ``NoPieceAtSquare``,
        ``NotYourTurn`` or ``IllegalMove``; on any error the game is unchanged.
        """
        if self.is_game_over:
            raise GameOver(f"Game is over ({self._status.name.lower()})")

        src = Position.coerce(from_pos)
        dst = Position.coerce(to_pos)
        if dst not in self.legal_moves(src):
            _LOGGER.debug("Rejected %s%s for %s", src, dst, self._turn)
            raise IllegalMove(f"Illegal move {src}{dst}")

        board = self._board.moved(src, dst)
        turn = self._turn.opposite
        status = Rules.status(board, turn)

        self._board, self._turn, self._status = board, turn, status

        _LOGGER.debug("Applied %s%s, %s to move, status %s", src, dst, turn, status.name)
        if status.is_terminal:
            _LOGGER.info("Game over: %s with %s to move", status.name, turn)
        return status

    def __repr__(self) -> str:
        return f"{self._board!r}\n{self._turn} to move ({self._status.name.lower()})"
