"""Training listener interface."""

from __future__ import annotations

from typing import Protocol

from trainreport.listeners.events import At, Batch, Loss, Operation


class TrainingListener(Protocol):
    """Callback contract a training engine drives during fitting."""

    def is_active(self, operation: Operation) -> bool:
        """Whether this listener wants events for `operation`."""
        return True

    def on_epoch_start(self, at: At) -> None:
        """Called before the first iteration of an epoch."""

    def on_epoch_end(self, at: At) -> None:
        """Called after the last iteration of an epoch."""

    def on_iteration_start(self, at: At, batch: Batch, etl_ms: float) -> None:
        """Called once a batch is ready, with the time spent waiting for it."""

    def on_iteration_done(self, at: At, batch: Batch, loss: Loss) -> None:
        """Called after the step for `batch` completed."""
