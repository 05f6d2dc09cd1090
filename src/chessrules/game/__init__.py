"""Game management layer: a single game's state machine.

Quick start::

    from chessrules.game import Game

    game = Game()
    game.legal_moves("e2")          # frozenset({e3, e4})
    game.apply_move("e2", "e4")     # GameStatus.NORMAL
"""

from chessrules.game.state import Game

__all__ = [
    "Game",
]
