"""
Unit tests for GameController.

Tests move dispatch, ticker lifecycle, listeners and input handling.
"""
import threading
from typing import List

import pytest
from sweeper_engine import GameOutcome, GameStatus, RevealResult, UnknownDifficulty
from sweeper_session import Button, Click, GameController, KeyPress, SessionConfig, Touch


class RecordingTicker:
    """Ticker that records start/stop calls and ticks on demand."""

    def __init__(self, callback, interval: float = 1.0) -> None:
        self.callback = callback
        self.interval = interval
        self.is_running = False
        self.starts = 0

    def start(self) -> None:
        if not self.is_running:
            self.starts += 1
        self.is_running = True

    def stop(self) -> None:
        self.is_running = False

    def tick(self) -> None:
        self.callback()


class GatedEngine:
    """Engine wrapper whose first reveal waits, still holding the game lock."""

    def __init__(self, engine) -> None:
        self.engine = engine
        self.entered = threading.Event()
        self.release = threading.Event()
        self._gated = True

    def __getattr__(self, name):
        return getattr(self.engine, name)

    def reveal(self, state, row: int, col: int) -> RevealResult:
        result = self.engine.reveal(state, row, col)
        if self._gated:
            self._gated = False
            self.entered.set()
            assert self.release.wait(timeout=5.0)
        return result


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def events() -> dict:
    """Listener call log."""
    return {"changes": [], "ticks": [], "outcomes": []}


@pytest.fixture
def controller(wall_engine, events) -> GameController:
    """Controller on the wall layout with a recording ticker."""
    changes: List[RevealResult] = events["changes"]
    ticks: List[int] = events["ticks"]
    outcomes: List[GameOutcome] = events["outcomes"]
    return GameController(
        SessionConfig(difficulty="easy", tick_interval=0.5),
        engine=wall_engine,
        on_change=changes.append,
        on_tick=ticks.append,
        on_complete=outcomes.append,
        ticker_factory=RecordingTicker,
    )


# ============================================================================
# Lifecycle Tests
# ============================================================================

class TestLifecycle:
    """Test game creation and the ticker."""

    def test_starts_with_ready_game(self, controller: GameController) -> None:
        """A game is ready as soon as the controller exists."""
        assert controller.state.status is GameStatus.READY
        assert controller.ticker.interval == 0.5
        assert controller.ticker.is_running is False

    def test_first_reveal_starts_ticker(self, controller: GameController) -> None:
        """The clock display starts with the first reveal."""
        controller.reveal(0, 3)
        assert controller.ticker.is_running is True
        controller.reveal(1, 3)
        assert controller.ticker.starts == 1

    def test_flag_does_not_start_ticker(self, controller: GameController) -> None:
        """Flags alone do not start the game."""
        controller.toggle_flag(0, 4)
        assert controller.ticker.is_running is False

    def test_loss_stops_ticker(self, controller: GameController, events) -> None:
        """Leaving playing stops the ticker and reports the outcome."""
        controller.reveal(0, 3)
        controller.reveal(0, 4)
        assert controller.ticker.is_running is False
        assert len(events["outcomes"]) == 1
        assert events["outcomes"][0].status is GameStatus.LOST

    def test_win_reports_outcome_once(self, controller: GameController, events) -> None:
        """Completion fires once, even if the player keeps clicking."""
        controller.reveal(4, 0)
        controller.reveal(0, 6)
        controller.reveal(0, 6)
        assert [o.status for o in events["outcomes"]] == [GameStatus.WON]
        assert controller.ticker.is_running is False

    def test_new_game_stops_ticker_and_resets(self, controller: GameController) -> None:
        """A new game replaces the state and stops the clock."""
        controller.reveal(4, 0)
        old_state = controller.state
        state = controller.new_game()
        assert state is controller.state
        assert state is not old_state
        assert state.status is GameStatus.READY
        assert controller.ticker.is_running is False

    def test_new_game_with_other_difficulty(self, controller: GameController) -> None:
        """Changing difficulty sticks for later new games."""
        controller.engine.mines = [(0, col) for col in range(16)] + [
            (1, col) for col in range(16)
        ] + [(2, col) for col in range(8)]
        controller.new_game("medium")
        assert controller.state.difficulty.label == "Medium"
        controller.new_game()
        assert controller.state.difficulty.label == "Medium"

    def test_unknown_difficulty_keeps_current_game(
        self, controller: GameController
    ) -> None:
        """A bad preset name does not destroy the running game."""
        state = controller.state
        with pytest.raises(UnknownDifficulty):
            controller.new_game("unknown")
        assert controller.state is state

    def test_tick_reports_elapsed(self, controller: GameController, clock, events) -> None:
        """Ticks read elapsed seconds from the game."""
        controller.reveal(0, 3)
        clock.advance(3)
        controller.ticker.tick()
        assert events["ticks"] == [3]


# ============================================================================
# Listener Tests
# ============================================================================

class TestListeners:
    """Test change notifications."""

    def test_change_listener_gets_results(self, controller: GameController, events) -> None:
        """Each effective move is reported."""
        controller.reveal(4, 0)
        controller.toggle_flag(0, 4)
        assert len(events["changes"]) == 2
        assert len(events["changes"][0].changed) == 36

    def test_ignored_moves_are_not_reported(
        self, controller: GameController, events
    ) -> None:
        """Nothing to redraw for an ignored move."""
        controller.reveal(0, 3)
        controller.reveal(0, 3)
        assert len(events["changes"]) == 1

    def test_queries(self, controller: GameController) -> None:
        """Counters are readable through the controller."""
        controller.toggle_flag(0, 4)
        assert controller.remaining_mines() == 9
        assert controller.elapsed_seconds() == 0
        assert controller.stats()["flagged_cells"] == 1


# ============================================================================
# Input Handling Tests
# ============================================================================

class TestHandle:
    """Test raw input dispatch."""

    def test_primary_click_reveals(self, controller: GameController) -> None:
        """Plain click reveals."""
        result = controller.handle(Click(0, 3))
        assert result is not None
        assert controller.state.board.cell(0, 3).is_revealed

    def test_secondary_click_flags(self, controller: GameController) -> None:
        """Right click flags."""
        controller.handle(Click(0, 4, button=Button.SECONDARY))
        assert controller.state.board.cell(0, 4).is_flagged

    def test_long_press_flags(self, controller: GameController) -> None:
        """Long press flags."""
        controller.handle(Touch(0, 4, duration=0.8))
        assert controller.state.board.cell(0, 4).is_flagged

    def test_flag_mode_key_then_click_flags(self, controller: GameController) -> None:
        """In flag mode a plain click flags."""
        assert controller.handle(KeyPress("f")) is None
        assert controller.flag_mode is True
        controller.handle(Click(0, 4))
        assert controller.state.board.cell(0, 4).is_flagged
        assert controller.state.status is GameStatus.READY

    def test_new_game_key_resets_flag_mode(self, controller: GameController) -> None:
        """Ctrl+R starts over and leaves flag mode."""
        controller.handle(KeyPress("f"))
        old_state = controller.state
        controller.handle(KeyPress("r", ctrl=True))
        assert controller.state is not old_state
        assert controller.flag_mode is False

    def test_meaningless_input_is_dropped(self, controller: GameController) -> None:
        """Moved touches and unbound keys do nothing."""
        assert controller.handle(Touch(0, 3, duration=0.1, moved=True)) is None
        assert controller.handle(KeyPress("x")) is None
        assert controller.state.revealed_count == 0


# ============================================================================
# Concurrency Tests
# ============================================================================

class TestConcurrentMoves:
    """Test that the ticker follows the live game across threads."""

    @pytest.fixture
    def gated(self, wall_engine) -> GatedEngine:
        """Wall engine whose first reveal blocks until released."""
        return GatedEngine(wall_engine)

    @pytest.fixture
    def gated_controller(self, gated: GatedEngine) -> GameController:
        """Controller playing through the gated engine."""
        return GameController(
            SessionConfig(difficulty="easy"),
            engine=gated,
            ticker_factory=RecordingTicker,
        )

    def run_while_revealing(self, gated: GatedEngine, controller, other) -> None:
        """Reveal (0, 3) on one thread and run other() while it is held."""
        mover = threading.Thread(target=controller.reveal, args=(0, 3))
        mover.start()
        assert gated.entered.wait(timeout=5.0)

        racer = threading.Thread(target=other)
        racer.start()
        # Let the racer block on the controller before the reveal returns.
        threading.Event().wait(0.05)
        gated.release.set()

        mover.join(timeout=5.0)
        racer.join(timeout=5.0)
        assert not mover.is_alive()
        assert not racer.is_alive()

    def test_new_game_during_reveal_leaves_ticker_stopped(
        self, gated: GatedEngine, gated_controller: GameController
    ) -> None:
        """A new game started mid-reveal is not left with a running clock."""
        self.run_while_revealing(gated, gated_controller, gated_controller.new_game)
        assert gated_controller.state.status is GameStatus.READY
        assert gated_controller.ticker.is_running is False

    def test_loss_during_reveal_leaves_ticker_stopped(
        self, gated: GatedEngine, gated_controller: GameController
    ) -> None:
        """A stale playing result does not restart the clock after a loss."""
        self.run_while_revealing(
            gated, gated_controller, lambda: gated_controller.reveal(0, 4)
        )
        assert gated_controller.state.status is GameStatus.LOST
        assert gated_controller.ticker.is_running is False

    def test_sequential_reveal_still_starts_ticker(
        self, gated: GatedEngine, gated_controller: GameController
    ) -> None:
        """Without a racer the clock runs once the game is playing."""
        gated.release.set()
        gated_controller.reveal(0, 3)
        assert gated_controller.state.status is GameStatus.PLAYING
        assert gated_controller.ticker.is_running is True
