"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import Board, Position, Rules

    board = Board.initial()
    print(Rules.legal_moves(board, Position.parse("g1")))
"""

from chessrules.core.attacks import attackers_of, is_attacked, is_in_check
from chessrules.core.board import DEFAULT_PROMOTION, Board
from chessrules.core.enums import Color, GameResult, GameStatus, PieceType
from chessrules.core.errors import (
    ChessError,
    GameOver,
    IllegalMove,
    InvalidBoard,
    InvalidPosition,
    NoKing,
    NoPieceAtSquare,
    NotYourTurn,
)
from chessrules.core.move_generator import MoveGenerator, pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Errors
    "ChessError",
    "GameOver",
    "IllegalMove",
    "InvalidBoard",
    "InvalidPosition",
    "NoKing",
    "NoPieceAtSquare",
    "NotYourTurn",
    # Domain objects
    "Board",
    "DEFAULT_PROMOTION",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Functions
    "attackers_of",
    "is_attacked",
    "is_in_check",
    "pseudo_legal_moves",
]
