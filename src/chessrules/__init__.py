"""Chess rules engine: legal moves, check, checkmate and stalemate."""

from chessrules.core import Color, GameStatus, PieceType, Position
from chessrules.game import Game

__all__ = ["Color", "Game", "GameStatus", "PieceType", "Position"]
