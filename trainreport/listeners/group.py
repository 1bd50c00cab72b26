"""Fan-out of engine callbacks to several listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from trainreport.listeners.base import TrainingListener
from trainreport.listeners.events import At, Batch, Loss, Operation

LOGGER = logging.getLogger(__name__)


class ListenerGroup(TrainingListener):
    """Dispatch every callback to each listener active for the operation.

    A listener that raises is logged and skipped for that callback only;
    observers must never stop the loop they observe.
    """

    def __init__(self, listeners: Iterable[TrainingListener] = ()) -> None:
        self._listeners: list[TrainingListener] = list(listeners)

    @property
    def listeners(self) -> tuple[TrainingListener, ...]:
        return tuple(self._listeners)

    def add(self, listener: TrainingListener) -> ListenerGroup:
        if listener not in self._listeners:
            self._listeners.append(listener)
        return self

    def is_active(self, operation: Operation) -> bool:
        for listener in self._listeners:
            try:
                if listener.is_active(operation):
                    return True
            except Exception:
                LOGGER.exception(
                    "listener_is_active_failed listener=%s operation=%s",
                    type(listener).__name__,
                    operation.value,
                )
        return False

    def _dispatch(
        self,
        event: str,
        at: At,
        call: Callable[[TrainingListener], None],
    ) -> None:
        for listener in self._listeners:
            try:
                if listener.is_active(at.operation):
                    call(listener)
            except Exception:
                LOGGER.exception(
                    "listener_callback_failed listener=%s event=%s epoch=%d "
                    "iteration=%d",
                    type(listener).__name__,
                    event,
                    at.epoch,
                    at.iteration,
                )

    def on_epoch_start(self, at: At) -> None:
        self._dispatch("epoch_start", at, lambda listener: listener.on_epoch_start(at))

    def on_epoch_end(self, at: At) -> None:
        self._dispatch("epoch_end", at, lambda listener: listener.on_epoch_end(at))

    def on_iteration_start(self, at: At, batch: Batch, etl_ms: float) -> None:
        self._dispatch(
            "iteration_start",
            at,
            lambda listener: listener.on_iteration_start(at, batch, etl_ms),
        )

    def on_iteration_done(self, at: At, batch: Batch, loss: Loss) -> None:
        self._dispatch(
            "iteration_done",
            at,
            lambda listener: listener.on_iteration_done(at, batch, loss),
        )
