"""
Tile module for Minesweeper.

Represents individual tiles on the board with their hidden/revealed
state and content (mine or adjacent mine count).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


# ============================================================================
# Constants
# ============================================================================

class TileValue(Enum):
    """Non-numeric tile values."""

    EMPTY = auto()
    MINE = auto()


HIDDEN_SYMBOL = "-"
MINE_SYMBOL = "*"


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        is_mine: Whether this tile holds a mine.
        adjacent_mines: Count of mines in neighboring tiles (0-8), or None
            until the tile is revealed and the count computed.
        hidden: Whether the tile is still covered.
    """

    is_mine: bool = False
    adjacent_mines: Optional[int] = None
    hidden: bool = True

    @property
    def value(self) -> Union[TileValue, int]:
        """Tri-state value: EMPTY, a mine count, or MINE."""
        if self.is_mine:
            return TileValue.MINE
        if self.adjacent_mines is None:
            return TileValue.EMPTY
        return self.adjacent_mines

    def reveal(self) -> bool:
        """
        Uncover this tile.

        Returns:
            True if the tile was hidden, False if already revealed.
        """
        if not self.hidden:
            return False
        self.hidden = False
        return True

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return not self.hidden

    def to_observation(self) -> int:
        """
        Convert tile to an integer code.

        Returns:
            -1: Hidden tile
            -2: Revealed tile without a computed count
            0-8: Revealed tile with adjacent mine count
            9: Revealed mine
        """
        if self.hidden:
            return -1
        if self.is_mine:
            return 9
        if self.adjacent_mines is None:
            return -2
        return self.adjacent_mines

    def to_symbol(self) -> str:
        """Display symbol: '-' hidden, '*' mine, digit otherwise."""
        if self.hidden:
            return HIDDEN_SYMBOL
        if self.is_mine:
            return MINE_SYMBOL
        if self.adjacent_mines is None:
            return HIDDEN_SYMBOL
        return str(self.adjacent_mines)
