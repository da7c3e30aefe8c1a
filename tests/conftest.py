"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, GameSession, Tile, create_board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible mine layouts."""
    return random.Random(1234)


@pytest.fixture
def empty_board() -> Board:
    """A 5x5 board with no mines, ready to reveal."""
    board = create_board(5, 5)
    board.place_mines(0)
    return board


@pytest.fixture
def corner_mine_board() -> Board:
    """A 2x2 board with a single mine at (0, 0)."""
    board = create_board(2, 2)
    board.place_mines_at([(0, 0)])
    return board


@pytest.fixture
def walled_board() -> Board:
    """
    A 5x5 board with a column of mines at x=2.

    Tiles at x=0 form a zero region bordered by x=1; x=3..4 are cut off.
    """
    board = create_board(5, 5)
    board.place_mines_at([(2, y) for y in range(5)])
    return board


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile holding a mine."""
    return Tile(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """A 4x4 board with 3 mines."""
    return BoardConfig(4, 4, 3)


@pytest.fixture
def session(small_config: BoardConfig) -> GameSession:
    """A seeded session that has not started yet."""
    return GameSession(small_config, seed=7)
