"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest
from fakes import Board, TicTacToe

from gametree.engine import MinimaxEngine, SearchLimits


@pytest.fixture()
def tictactoe() -> TicTacToe:
    return TicTacToe()


@pytest.fixture()
def empty_board() -> Board:
    return Board()


@pytest.fixture()
def full_depth_engine(tictactoe: TicTacToe) -> MinimaxEngine[Board, int]:
    """Engine that sees every tic-tac-toe position to the end of the game."""
    return MinimaxEngine(tictactoe, SearchLimits(max_moves=9, max_depth=9))
