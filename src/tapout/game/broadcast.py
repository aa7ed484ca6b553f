"""StopBroadcast — many-listener stop signal for one grid of tiles."""

from __future__ import annotations

import logging
import weakref

from tapout.game.interfaces import IStopListener

_LOGGER = logging.getLogger(__name__)


class StopBroadcast:
    """Explicitly scoped publish/subscribe channel.

    Listeners are held weakly, so a discarded tile simply drops out.
    ``publish`` runs synchronously on the caller's thread; subscriptions
    survive it.
    """

    __slots__ = ("_listeners", "_fired")

    def __init__(self) -> None:
        self._listeners: weakref.WeakSet[IStopListener] = weakref.WeakSet()
        self._fired = False

    def subscribe(self, listener: IStopListener) -> None:
        self._listeners.add(listener)

    def unsubscribe(self, listener: IStopListener) -> None:
        self._listeners.discard(listener)

    def publish(self) -> None:
        """Invoke ``on_stop_signal`` on every live subscriber once."""
        listeners = list(self._listeners)
        _LOGGER.debug("stop signal -> %d listener(s)", len(listeners))
        self._fired = True
        for listener in listeners:
            listener.on_stop_signal()

    @property
    def fired(self) -> bool:
        return self._fired

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners
