"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.game.state import Game


@pytest.fixture
def initial_board() -> Board:
    """Fresh standard starting board."""
    return Board.initial()


@pytest.fixture
def game() -> Game:
    """Fresh game, White to move."""
    return Game()
