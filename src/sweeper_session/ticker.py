"""
Wall-clock ticker for the elapsed-time display.

Calls a function once per interval on a background thread until
stopped. The ticker only reads game state; it never drives the engine.
"""
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Ticker:
    """
    Periodic callback that can be started and stopped repeatedly.

    stop() is idempotent and safe to call on a ticker that never started.
    """

    def __init__(self, callback: Callable[[], None], interval: float = 1.0) -> None:
        """
        Initialize the ticker.

        Args:
            callback: Called once per tick, from the ticker thread.
            interval: Seconds between ticks.
        """
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.callback = callback
        self.interval = interval
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        # Guards _stop_event and _thread; never held while joining.
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        """Check if the ticker thread is active."""
        stop_event = self._stop_event
        return stop_event is not None and not stop_event.is_set()

    def start(self) -> None:
        """Start ticking. Does nothing if already running."""
        with self._lock:
            if self.is_running:
                return
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._run, args=(stop_event,), name="ticker", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop ticking and wait for the thread to exit."""
        with self._lock:
            if self._stop_event is None:
                return
            self._stop_event.set()
            thread = self._thread
            self._stop_event = None
            self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _run(self, stop_event: threading.Event) -> None:
        # Each thread owns its event, so a restart never revives an old loop.
        while not stop_event.wait(self.interval):
            try:
                self.callback()
            except Exception:
                logger.exception("Tick callback failed")
