"""
Game session for Minesweeper.

Connects a front end (text prompt, environment, UI) to the board engine:
starting games, forwarding clicks while a game is running, disclosing
mines on a loss, and announcing the end of the game.
"""
import random
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional

from .board import Board, BoardConfig, GameStatus, create_board


StatusListener = Callable[["GameSession", GameStatus], None]


class GamePhase(Enum):
    """Whether a game is currently running."""

    PRE_GAME = auto()
    PLAYING = auto()


class GameSession:
    """
    A single-player session owning the current board.

    A new ``Board`` is created for every game; boards are never reset
    in place.
    """

    def __init__(self, config: Optional[BoardConfig] = None, seed: Optional[int] = None) -> None:
        self.config = config or BoardConfig()
        self.rng = random.Random(seed)
        self.board: Optional[Board] = None
        self.phase = GamePhase.PRE_GAME
        self._listeners: List[StatusListener] = []

    def add_listener(self, callback: StatusListener) -> None:
        """Register a callback for WON / LOST transitions."""
        self._listeners.append(callback)

    def start(self, config: Optional[BoardConfig] = None, seed: Optional[int] = None) -> Board:
        """
        Start a new game: create a board and place its mines.

        Args:
            config: Replaces the session configuration when given.
            seed: Reseeds the mine placement generator when given.

        Returns:
            The new board.
        """
        if config is not None:
            self.config = config
        if seed is not None:
            self.rng.seed(seed)

        board = create_board(self.config.width, self.config.height)
        board.place_mines(self.config.num_mines, self.rng)
        self.board = board
        self.phase = GamePhase.PLAYING
        return board

    @property
    def is_playing(self) -> bool:
        """Check if a game is running."""
        return self.phase == GamePhase.PLAYING

    @property
    def status(self) -> Optional[GameStatus]:
        """Status of the current board, or None before the first game."""
        return self.board.status if self.board is not None else None

    def click(self, x: int, y: int) -> Optional[GameStatus]:
        """
        Reveal (x, y) on the current board.

        Clicks outside a running game are ignored. On a terminal result the
        listeners are notified and the session returns to the pre-game phase.

        Returns:
            The board status after the click, or None if no game exists.
        """
        if self.board is None:
            return None
        if not self.is_playing or not self.board.is_in_progress:
            return self.board.status

        self.board.reveal(x, y)

        if self.board.is_lost:
            self.board.reveal_all_mines()
        if not self.board.is_in_progress:
            self._finish(self.board.status)
        return self.board.status

    def _finish(self, status: GameStatus) -> None:
        self.phase = GamePhase.PRE_GAME
        for callback in list(self._listeners):
            callback(self, status)

    def get_state(self) -> Dict[str, Any]:
        """
        Return a serializable snapshot of the session.
        """
        board = self.board
        return {
            "phase": self.phase.name,
            "status": board.status.name if board else None,
            "board": board.to_symbols() if board else None,
            "exposed": board.exposed_count if board else 0,
            "dimensions": (self.config.width, self.config.height),
            "num_mines": self.config.num_mines,
        }
