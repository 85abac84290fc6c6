"""
Game controller: the single owner of a running game.

Sits between the presentation layer and the engine. It keeps the
current GameState behind one lock, runs the elapsed-time ticker while
the game is being played, and tells listeners about every change.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from sweeper_engine import BoardEngine, Difficulty, GameOutcome, GameState, GameStatus, RevealResult

from .input import Action, InputEvent, InputTranslator
from .ticker import Ticker

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class SessionConfig:
    """Settings for one play session."""

    # Game settings
    difficulty: Union[str, Difficulty] = "easy"

    # Clock settings
    tick_interval: float = 1.0

    # Input settings
    long_press_delay: float = 0.5


ChangeListener = Callable[[RevealResult], None]
TickListener = Callable[[int], None]
CompletionListener = Callable[[GameOutcome], None]


# ============================================================================
# Controller
# ============================================================================

class GameController:
    """
    Drives one game at a time on behalf of a UI.

    Moves from any thread are serialized by a single lock, since a
    reveal cascade cannot be split into smaller atomic steps. The ticker
    is started or stopped from the live game status under a second lock,
    so it never outlives the playing state. Listeners are called after
    the locks are released.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        engine: Optional[BoardEngine] = None,
        on_change: Optional[ChangeListener] = None,
        on_tick: Optional[TickListener] = None,
        on_complete: Optional[CompletionListener] = None,
        ticker_factory: Callable[..., Ticker] = Ticker,
    ) -> None:
        """
        Initialize the controller and start a first game.

        Args:
            config: Session settings.
            engine: Engine used to create and play games.
            on_change: Called with the result of every move.
            on_tick: Called with elapsed seconds once per tick.
            on_complete: Called once when a game is won or lost.
            ticker_factory: Builds the ticker from (callback, interval).
        """
        self.config = config or SessionConfig()
        self.engine = engine or BoardEngine()
        self.on_change = on_change
        self.on_tick = on_tick
        self.on_complete = on_complete

        self.translator = InputTranslator(self.config.long_press_delay)
        self.ticker = ticker_factory(self._tick, self.config.tick_interval)
        self._lock = threading.RLock()
        # Taken before _lock; ticker.stop() joins outside _lock.
        self._ticker_lock = threading.Lock()
        self._difficulty = self.config.difficulty
        self.state: GameState = self.engine.initialize(self._difficulty)

    # ========================================================================
    # Game Lifecycle
    # ========================================================================

    def new_game(self, difficulty: Union[str, Difficulty, None] = None) -> GameState:
        """
        Throw away the current game and start another.

        Args:
            difficulty: New preset; keeps the current one when omitted.

        Raises:
            UnknownDifficulty: If the preset name is not registered.
        """
        with self._ticker_lock:
            self.ticker.stop()
            with self._lock:
                chosen = self._difficulty if difficulty is None else difficulty
                self.state = self.engine.initialize(chosen)
                self._difficulty = chosen
                self.translator.flag_mode = False
                return self.state

    def close(self) -> None:
        """Stop background work."""
        with self._ticker_lock:
            self.ticker.stop()

    # ========================================================================
    # Moves
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """Reveal a cell in the current game."""
        with self._lock:
            result = self.engine.reveal(self.state, row, col)
        self._after_move(result)
        return result

    def toggle_flag(self, row: int, col: int) -> RevealResult:
        """Flag or unflag a cell in the current game."""
        with self._lock:
            result = self.engine.toggle_flag(self.state, row, col)
        self._after_move(result)
        return result

    def handle(self, event: InputEvent) -> Optional[RevealResult]:
        """
        Apply a raw input event.

        Returns:
            The move result for cell commands, otherwise None.
        """
        command = self.translator.translate(event)
        if command is None:
            return None
        if command.action is Action.REVEAL:
            return self.reveal(command.row, command.col)
        if command.action is Action.FLAG:
            return self.toggle_flag(command.row, command.col)
        if command.action is Action.NEW_GAME:
            self.new_game()
        elif command.action is Action.TOGGLE_FLAG_MODE:
            self.translator.flag_mode = not self.translator.flag_mode
            logger.debug(
                "Flag mode %s", "on" if self.translator.flag_mode else "off"
            )
        return None

    def _after_move(self, result: RevealResult) -> None:
        self._sync_ticker()

        if self.on_change is not None and not result.ignored:
            self.on_change(result)
        if result.outcome is not None:
            logger.info(result.outcome.message)
            if self.on_complete is not None:
                self.on_complete(result.outcome)

    def _sync_ticker(self) -> None:
        # Read the live status: result.status may be stale if another thread
        # started a new game or ended this one after the move.
        with self._ticker_lock:
            with self._lock:
                playing = self.state.status is GameStatus.PLAYING
            if playing:
                self.ticker.start()
            else:
                self.ticker.stop()

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def flag_mode(self) -> bool:
        return self.translator.flag_mode

    def elapsed_seconds(self) -> int:
        with self._lock:
            return self.engine.elapsed_seconds(self.state)

    def remaining_mines(self) -> int:
        with self._lock:
            return self.state.remaining_mines

    def stats(self) -> Dict[str, Any]:
        """Summary of the current game."""
        with self._lock:
            return self.engine.stats(self.state)

    def _tick(self) -> None:
        elapsed = self.elapsed_seconds()
        if self.on_tick is not None:
            self.on_tick(elapsed)
