"""
Minesweeper board engine.

Provides the board engine (tiles, mine placement, flood-fill reveal,
win/loss tracking), a game session for front ends, and a gymnasium
environment.
"""
from .tile import Tile, TileValue
from .board import (
    Board,
    BoardConfig,
    BoardError,
    GameStateError,
    GameStatus,
    InvalidConfigurationError,
    OutOfBoundsError,
    create_board,
    get_status,
    is_in_progress,
    is_lost,
    is_won,
    place_mines,
    place_mines_at,
    reveal,
    reveal_all_mines,
)
from .session import GamePhase, GameSession
from .environment import MinesweeperEnv, render_ansi

__all__ = [
    "Tile",
    "TileValue",
    "Board",
    "BoardConfig",
    "BoardError",
    "GameStateError",
    "GameStatus",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "create_board",
    "get_status",
    "is_in_progress",
    "is_lost",
    "is_won",
    "place_mines",
    "place_mines_at",
    "reveal",
    "reveal_all_mines",
    "GamePhase",
    "GameSession",
    "MinesweeperEnv",
    "render_ansi",
]
