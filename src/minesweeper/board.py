"""
Board module for Minesweeper.

Implements the board engine: grid creation, mine placement, the
breadth-first reveal, and win/loss tracking.
"""
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .tile import Tile


Position = Tuple[int, int]

NEIGHBOR_OFFSETS = (
    (-1, 1), (1, 1), (-1, -1), (1, -1),
    (0, -1), (0, 1), (1, 0), (-1, 0),
)


# ============================================================================
# Errors
# ============================================================================

class BoardError(ValueError):
    """Base class for invalid use of the board engine."""


class InvalidConfigurationError(BoardError):
    """Raised for bad dimensions or mine counts."""


class OutOfBoundsError(BoardError, IndexError):
    """Raised when a coordinate falls outside the board."""


class GameStateError(BoardError):
    """Raised when an operation is called out of lifecycle order."""


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


def _validate_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise InvalidConfigurationError("Board dimensions must be positive")


def _validate_mine_count(width: int, height: int, num_mines: int) -> None:
    if num_mines < 0:
        raise InvalidConfigurationError("Number of mines cannot be negative")
    max_mines = width * height - 1
    if num_mines > max_mines:
        raise InvalidConfigurationError(f"Too many mines (max {max_mines})")


@dataclass
class BoardConfig:
    """
    Parameters for a new game.

    Attributes:
        width: Number of columns (x range).
        height: Number of rows (y range).
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        _validate_dimensions(self.width, self.height)
        _validate_mine_count(self.width, self.height, self.num_mines)

    @property
    def safe_tiles(self) -> int:
        """Number of tiles that must be revealed to win."""
        return self.width * self.height - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    The grid is indexed ``grid[x][y]`` with ``0 <= x < width`` and
    ``0 <= y < height``. Mines are placed once, after creation and before
    the first reveal.
    """

    width: int
    height: int
    mine_count: int = field(default=0, init=False)
    grid: List[List[Tile]] = field(default_factory=list, init=False, repr=False)
    exposed_count: int = field(default=0, init=False)
    status: GameStatus = field(default=GameStatus.IN_PROGRESS, init=False)
    mines_placed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Build the empty grid after dataclass creation."""
        _validate_dimensions(self.width, self.height)
        self.grid = [
            [Tile() for _ in range(self.height)]
            for _ in range(self.width)
        ]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside a {self.width}x{self.height} board"
            )

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get in-bounds neighbors of a tile.

        Args:
            x: Column of the center tile.
            y: Row of the center tile.

        Returns:
            Up to 8 (x, y) tuples, clipped to the board.
        """
        return [
            (x + dx, y + dy)
            for dx, dy in NEIGHBOR_OFFSETS
            if self.in_bounds(x + dx, y + dy)
        ]

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines among the neighbors of (x, y)."""
        return sum(
            1 for nx, ny in self.neighbors(x, y) if self.grid[nx][ny].is_mine
        )

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def _begin_placement(self, mine_count: int) -> None:
        if self.mines_placed:
            raise GameStateError("Mines have already been placed")
        _validate_mine_count(self.width, self.height, mine_count)

    def place_mines(
        self, mine_count: int, rng: Optional[random.Random] = None
    ) -> None:
        """
        Place mines at uniformly random positions.

        Samples coordinates and keeps those that are not already mines
        until exactly ``mine_count`` mines exist.

        Args:
            mine_count: Number of mines, ``0 <= mine_count < width*height``.
            rng: Random source; a fresh unseeded generator when None.
        """
        self._begin_placement(mine_count)
        rng = rng or random.Random()

        placed = 0
        while placed < mine_count:
            x = rng.randrange(self.width)
            y = rng.randrange(self.height)
            tile = self.grid[x][y]
            if not tile.is_mine:
                tile.is_mine = True
                placed += 1

        self.mine_count = mine_count
        self.mines_placed = True

    def place_mines_at(self, positions: Iterable[Position]) -> None:
        """
        Place mines at explicit positions.

        Args:
            positions: Distinct in-bounds (x, y) tuples.
        """
        unique = []
        seen = set()
        for x, y in positions:
            self._check_bounds(x, y)
            if (x, y) in seen:
                raise InvalidConfigurationError(f"Duplicate mine at ({x}, {y})")
            seen.add((x, y))
            unique.append((x, y))

        self._begin_placement(len(unique))
        for x, y in unique:
            self.grid[x][y].is_mine = True

        self.mine_count = len(unique)
        self.mines_placed = True

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the tile at (x, y).

        A mine ends the game without uncovering anything else. Any other
        tile starts a breadth-first flood fill that keeps expanding through
        tiles with zero adjacent mines.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            True if the board changed, False for an already revealed tile
            or a finished game.
        """
        self._check_bounds(x, y)
        if not self.mines_placed:
            raise GameStateError("Mines must be placed before revealing")
        if self.status != GameStatus.IN_PROGRESS:
            return False

        tile = self.grid[x][y]
        if not tile.hidden:
            return False

        if tile.is_mine:
            tile.reveal()
            self.status = GameStatus.LOST
            return True

        self._flood_fill(x, y)
        self._check_win_condition()
        return True

    def _flood_fill(self, x: int, y: int) -> None:
        queue = deque([(x, y)])
        while queue:
            cx, cy = queue.popleft()
            tile = self.grid[cx][cy]
            # Duplicates can be queued before they are processed
            if not tile.hidden:
                continue

            surrounding = self.neighbors(cx, cy)
            tile.adjacent_mines = self.count_adjacent_mines(cx, cy)
            tile.reveal()
            self.exposed_count += 1

            if tile.adjacent_mines == 0:
                queue.extend(
                    (nx, ny) for nx, ny in surrounding
                    if self.grid[nx][ny].hidden
                )

    def _check_win_condition(self) -> None:
        if self.exposed_count == self.width * self.height - self.mine_count:
            self.status = GameStatus.WON

    def reveal_all_mines(self) -> None:
        """Uncover every mine, leaving other tiles and status untouched."""
        for column in self.grid:
            for tile in column:
                if tile.is_mine:
                    tile.hidden = False

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_in_progress(self) -> bool:
        """Check if game is still in progress."""
        return self.status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.status == GameStatus.LOST

    @property
    def safe_tiles(self) -> int:
        """Number of non-mine tiles."""
        return self.width * self.height - self.mine_count

    def get_tile(self, x: int, y: int) -> Tile:
        """Get tile at position."""
        self._check_bounds(x, y)
        return self.grid[x][y]

    def mine_positions(self) -> List[Position]:
        """All (x, y) positions holding a mine."""
        return [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if self.grid[x][y].is_mine
        ]

    def hidden_positions(self) -> List[Position]:
        """All (x, y) positions that are still covered."""
        return [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if self.grid[x][y].hidden
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed [x, y].

        Returns:
            Array of ``Tile.to_observation`` codes.
        """
        obs = np.full((self.width, self.height), -1, dtype=np.int8)
        for x in range(self.width):
            for y in range(self.height):
                obs[x, y] = self.grid[x][y].to_observation()
        return obs

    def to_symbols(self) -> List[List[str]]:
        """Display symbols for every tile, indexed [x][y]."""
        return [[tile.to_symbol() for tile in column] for column in self.grid]


# ============================================================================
# Functional API
# ============================================================================

def create_board(width: int, height: int) -> Board:
    """Create an empty board with every tile hidden and no mines."""
    return Board(width, height)


def place_mines(
    board: Board, mine_count: int, rng: Optional[random.Random] = None
) -> Board:
    """Place ``mine_count`` random mines on ``board`` and return it."""
    board.place_mines(mine_count, rng)
    return board


def place_mines_at(board: Board, positions: Iterable[Position]) -> Board:
    """Place mines at explicit ``positions`` on ``board`` and return it."""
    board.place_mines_at(positions)
    return board


def reveal(board: Board, x: int, y: int) -> bool:
    """Reveal (x, y) on ``board``; True if the board changed."""
    return board.reveal(x, y)


def reveal_all_mines(board: Board) -> Board:
    """Uncover all mines on ``board`` and return it."""
    board.reveal_all_mines()
    return board


def get_status(board: Board) -> GameStatus:
    """Get current game status."""
    return board.status


def is_in_progress(board: Board) -> bool:
    """Check if game is still in progress."""
    return board.is_in_progress


def is_won(board: Board) -> bool:
    """Check if game was won."""
    return board.is_won


def is_lost(board: Board) -> bool:
    """Check if game was lost."""
    return board.is_lost
