"""
Gymnasium environment wrapper for Minesweeper.

Lets programmatic players drive a game session through the standard
reset/step interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameStatus
from .session import GameSession


# ============================================================================
# Text Rendering
# ============================================================================

def render_ansi(board: Board) -> str:
    """
    Render a board as text, one line per x with y along the line.
    """
    lines = []
    for x in range(board.width):
        lines.append(" ".join(board.grid[x][y].to_symbol() for y in range(board.height)))
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        Array of shape (width, height) indexed [x, y] where:
        - -1 = hidden tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to tile (i // height, i % height).

    Rewards:
        - +1 for winning the game
        - -1 for revealing a mine
        - -0.1 for clicking an already revealed tile
        - 0 otherwise
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.width, self.config.height),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.width * self.config.height
        )

        self._steps = 0

    @property
    def board(self) -> Board:
        if self.session.board is None:
            raise RuntimeError("Call reset() before using the environment")
        return self.session.board

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Seed for mine placement.
            options: Unused.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.start(seed=seed)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Click the tile selected by ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self.action_to_position(action)
        self._steps += 1

        reward = self._click(x, y)
        terminated = not self.board.is_in_progress

        return self.board.get_observation(), reward, terminated, False, self._get_info()

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        x, y = divmod(int(action), self.config.height)
        return x, y

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return x * self.config.height + y

    def _click(self, x: int, y: int) -> float:
        if not self.board.is_in_progress:
            return 0.0
        if not self.board.get_tile(x, y).hidden:
            return -0.1

        status = self.session.click(x, y)
        if status == GameStatus.WON:
            return 1.0
        if status == GameStatus.LOST:
            return -1.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": self.board.exposed_count,
            "total_safe": self.board.safe_tiles,
            "game_state": self.board.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.board)
        if self.render_mode == "human":
            print(render_ansi(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of clickable tiles.

        Returns:
            Boolean array where True = hidden tile.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.board.hidden_positions():
            mask[self.position_to_action(x, y)] = True
        return mask
