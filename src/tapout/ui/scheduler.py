"""IScheduler backed by single-shot QTimers on the GUI event loop."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from tapout.game.interfaces import IScheduler, ITimerHandle


class QtTimerHandle(ITimerHandle):
    """Owns one single-shot QTimer until it fires or is cancelled."""

    __slots__ = ("_owner", "_timer", "_callback")

    def __init__(
        self,
        owner: QtScheduler,
        delay: float,
        callback: Callable[[], None],
        parent: QObject | None,
    ) -> None:
        self._owner = owner
        self._callback = callback
        self._timer: QTimer | None = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)
        self._timer.start(max(0, round(delay * 1000)))

    @property
    def is_pending(self) -> bool:
        return self._timer is not None

    @property
    def remaining_ms(self) -> int:
        """Milliseconds until firing, or -1 once done."""
        if self._timer is None:
            return -1
        return self._timer.remainingTime()

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._release()

    def _on_timeout(self) -> None:
        if self._timer is None:
            return
        self._release()
        self._callback()

    def _release(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.timeout.disconnect(self._on_timeout)
            timer.deleteLater()
        self._owner._handles.discard(self)


class QtScheduler(IScheduler):
    """Schedules tile transitions on the thread that owns *parent*.

    Qt dispatches timer events one at a time, so tile callbacks never
    overlap with each other or with click handlers.
    """

    __slots__ = ("_parent", "_handles")

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._handles: set[QtTimerHandle] = set()

    def call_later(self, delay: float, callback: Callable[[], None]) -> QtTimerHandle:
        handle = QtTimerHandle(self, delay, callback, self._parent)
        self._handles.add(handle)
        return handle

    @property
    def pending_count(self) -> int:
        return len(self._handles)

    def cancel_all(self) -> None:
        """Stop every outstanding timer (window teardown)."""
        for handle in list(self._handles):
            handle.cancel()
