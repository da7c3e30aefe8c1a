"""
Unit tests for Tile class.

Tests tile reveal behavior, tri-state values, and display conversion.
"""
from minesweeper import Tile, TileValue


# ============================================================================
# Tile Initialization Tests
# ============================================================================

class TestTileInitialization:
    """Test tile creation and default values."""

    def test_default_tile_is_hidden(self, hidden_tile: Tile) -> None:
        """New tile should be hidden."""
        assert hidden_tile.hidden is True
        assert hidden_tile.is_revealed is False

    def test_default_tile_value_is_empty(self, hidden_tile: Tile) -> None:
        """Count is not computed until reveal."""
        assert hidden_tile.adjacent_mines is None
        assert hidden_tile.value is TileValue.EMPTY

    def test_mine_tile_value(self, mine_tile: Tile) -> None:
        """Mine value is known from placement."""
        assert mine_tile.value is TileValue.MINE

    def test_count_value(self) -> None:
        """Computed count is exposed as an int."""
        tile = Tile(adjacent_mines=3)
        assert tile.value == 3


# ============================================================================
# Tile Reveal Tests
# ============================================================================

class TestTileReveal:
    """Test tile reveal behavior."""

    def test_reveal_hidden_tile_returns_true(self, hidden_tile: Tile) -> None:
        assert hidden_tile.reveal() is True
        assert hidden_tile.hidden is False

    def test_reveal_twice_returns_false(self, hidden_tile: Tile) -> None:
        """Second reveal changes nothing."""
        hidden_tile.reveal()
        assert hidden_tile.reveal() is False
        assert hidden_tile.is_revealed is True


# ============================================================================
# Display Conversion Tests
# ============================================================================

class TestDisplay:
    """Test observation codes and symbols."""

    def test_hidden_tile_observation(self, hidden_tile: Tile) -> None:
        assert hidden_tile.to_observation() == -1
        assert hidden_tile.to_symbol() == "-"

    def test_hidden_mine_looks_hidden(self, mine_tile: Tile) -> None:
        """Mines stay secret until revealed."""
        assert mine_tile.to_observation() == -1
        assert mine_tile.to_symbol() == "-"

    def test_revealed_mine(self, mine_tile: Tile) -> None:
        mine_tile.reveal()
        assert mine_tile.to_observation() == 9
        assert mine_tile.to_symbol() == "*"

    def test_revealed_count(self) -> None:
        tile = Tile(adjacent_mines=4)
        tile.reveal()
        assert tile.to_observation() == 4
        assert tile.to_symbol() == "4"

    def test_revealed_without_count(self, hidden_tile: Tile) -> None:
        """A tile uncovered without a computed count."""
        hidden_tile.reveal()
        assert hidden_tile.to_observation() == -2
