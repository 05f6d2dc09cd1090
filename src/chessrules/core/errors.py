"""Exception hierarchy raised by the rules engine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error the engine reports to callers."""


class InvalidPosition(ChessError, ValueError):
    """Row/column/index/algebraic input does not name a board square."""


class NoPieceAtSquare(ChessError):
    """A move or legality query referenced an empty square."""


class NotYourTurn(ChessError):
    """The piece on the source square belongs to the side not on move."""


class NoKing(ChessError, LookupError):
    """A check query needed a king that is not on the board."""


class IllegalMove(ChessError):
    """The destination is not among the legal moves of the source piece."""


class GameOver(ChessError):
    """A move was attempted after checkmate or stalemate."""


class InvalidBoard(ChessError, ValueError):
    """A board handed to a new game could not arise in play."""
