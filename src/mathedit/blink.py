"""Debounced cursor blinking.

The timer ticks at a fixed period but only flips the blink phase once no
interrupt (focus change or keystroke) has happened for a quiescent window, so
the cursor stays solid while the user is typing.

The debounce decision is a pure function of ``now`` and the last interrupt
time, which lets tests drive BlinkState with a fake clock.

"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass

from mathedit.utils.logger import get_logger

logger = get_logger(__name__)


def blink_due(now: float, last_interrupt: float, quiescent: float) -> bool:
    """Return True when the blink phase may flip.

    Example:
        >>> blink_due(10.0, 9.8, 0.5)
        False
        >>> blink_due(10.0, 9.5, 0.5)
        True
    """
    return now - last_interrupt >= quiescent


@dataclass(slots=True)
class BlinkState:
    """Blink phase plus the time of the last interrupt."""

    visible: bool = True
    last_interrupt: float = float("-inf")

    def interrupt(self, now: float) -> None:
        """Show the cursor and restart the quiescent window."""
        self.visible = True
        self.last_interrupt = now

    def tick(self, now: float, quiescent: float) -> bool:
        """Flip the phase if the quiescent window has elapsed.

        Returns:
            True if the phase changed
        """
        if not blink_due(now, self.last_interrupt, quiescent):
            return False
        self.visible = not self.visible
        return True


class BlinkTimer:
    """Recurring timer firing ``callback`` every ``interval`` seconds.

    Runs on a daemon thread and has an explicit lifecycle: ``start()`` once,
    ``stop()`` when the owner is destroyed.

    Where the callback runs:
    - With a ``scheduler``, the timer thread only hands the tick to it, e.g.
      ``loop.call_soon_threadsafe`` or a GUI toolkit's post-to-main-thread
      call, so observers run on the host's dispatch thread.
    - Without one, the callback runs on the timer thread itself. The Cursor
      serializes its state behind a lock, but observers then run on the
      timer thread and must be thread-safe.

    Hosts with their own event loop can also skip the timer entirely and
    call ``Cursor.tick()`` from that loop.

    A callback that raises is logged and the timer keeps ticking.

    """

    __slots__ = ("_interval", "_callback", "_scheduler", "_stopped", "_thread")

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        *,
        scheduler: Callable[[Callable[[], None]], object] | None = None,
    ) -> None:
        self._interval = interval
        self._callback = callback
        self._scheduler = scheduler
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("BlinkTimer already started")
        self._thread = threading.Thread(target=self._run, name="mathedit-blink", daemon=True)
        self._thread.start()
        logger.info("Blink timer started (interval %.3fs)", self._interval)

    def stop(self) -> None:
        """Stop ticking; safe to call more than once or before start()."""
        if self._stopped.is_set():
            return
        self._stopped.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self._interval * 2)
        logger.info("Blink timer stopped")

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            if self._scheduler is not None:
                self._scheduler(self._fire)
            else:
                self._fire()

    def _fire(self) -> None:
        if self._stopped.is_set():
            return
        try:
            self._callback()
        except Exception:
            logger.exception("Blink callback failed; timer keeps running")
