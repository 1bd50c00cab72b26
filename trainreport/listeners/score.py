"""Loss, throughput and ETL reporting for training loops."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from pydantic import ValidationError

from trainreport.config.schema import ReporterConfig
from trainreport.core.exceptions import InvalidConfigurationError
from trainreport.listeners.base import TrainingListener
from trainreport.listeners.events import At, Batch, Loss, Operation
from trainreport.util.formatting import format_2dp, format_5dp, format_duration_ms

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], float]


def monotonic_ms() -> int:
    """Milliseconds from a clock that never goes backwards."""
    return time.monotonic_ns() // 1_000_000


@dataclass
class EpochAccumulator:
    """Totals for the current epoch, reset on every epoch start."""

    start_ms: float | None = None
    example_count: int = 0
    batch_count: int = 0
    etl_ms: float = 0.0

    def reset(self, now_ms: float) -> None:
        self.start_ms = now_ms
        self.example_count = 0
        self.batch_count = 0
        self.etl_ms = 0.0


@dataclass
class WindowAccumulator:
    """Totals since the last periodic report."""

    last_iteration_start_ms: float | None = None
    etl_ms: float = 0.0
    iteration_ms: float = 0.0
    example_count: int = 0

    def reset(self) -> None:
        self.etl_ms = 0.0
        self.iteration_ms = 0.0
        self.example_count = 0


class ScoreReporter(TrainingListener):
    """Report loss every N iterations and a throughput summary per epoch.

    Every `report_frequency` iterations one line carries the epoch and
    iteration numbers, the total loss and, when non-zero, the time the loop
    spent blocked on data loading (ETL) since the previous report. ETL time
    that stays above zero points at an input-pipeline bottleneck.

    At the end of every epoch (when `report_epochs` is set) one line carries
    the batch and example counts, the epoch duration, batches/sec,
    examples/sec and the total ETL time with its share of the epoch.
    """

    def __init__(
        self,
        report_frequency: int = 10,
        report_epochs: bool = True,
        *,
        clock: Clock | None = None,
    ) -> None:
        try:
            self.config = ReporterConfig(
                report_frequency=report_frequency,
                report_epochs=report_epochs,
            )
        except ValidationError as exc:
            raise InvalidConfigurationError(
                "Invalid ScoreReporter settings "
                f"report_frequency={report_frequency!r} "
                f"report_epochs={report_epochs!r}: {exc}"
            ) from exc
        self._clock: Clock = clock or monotonic_ms
        self._lock = threading.Lock()
        self._epoch = EpochAccumulator()
        self._window = WindowAccumulator()

    @classmethod
    def from_config(
        cls,
        cfg: ReporterConfig,
        *,
        clock: Clock | None = None,
    ) -> ScoreReporter:
        return cls(cfg.report_frequency, cfg.report_epochs, clock=clock)

    @property
    def report_frequency(self) -> int:
        return self.config.report_frequency

    @property
    def report_epochs(self) -> bool:
        return self.config.report_epochs

    @property
    def epoch_state(self) -> EpochAccumulator:
        """Snapshot of the epoch totals."""
        with self._lock:
            return replace(self._epoch)

    @property
    def window_state(self) -> WindowAccumulator:
        """Snapshot of the totals since the last periodic report."""
        with self._lock:
            return replace(self._window)

    def is_active(self, operation: Operation) -> bool:
        return operation is Operation.TRAINING

    def on_epoch_start(self, at: At) -> None:
        if not self.report_epochs:
            return
        with self._lock:
            self._epoch.reset(self._clock())

    def on_epoch_end(self, at: At) -> None:
        if not self.report_epochs:
            return
        with self._lock:
            start_ms = self._epoch.start_ms
            if start_ms is not None:
                duration_ms = max(self._clock() - start_ms, 0)
                batches = self._epoch.batch_count
                examples = self._epoch.example_count
                etl_ms = self._epoch.etl_ms

        if start_ms is None:
            LOGGER.warning(
                "epoch_end_without_start epoch=%d iteration=%d",
                at.epoch,
                at.iteration,
            )
            return

        if duration_ms > 0:
            seconds = duration_ms / 1000.0
            batches_per_sec = batches / seconds
            examples_per_sec = examples / seconds
        else:
            batches_per_sec = 0.0
            examples_per_sec = 0.0

        etl = ""
        if etl_ms > 0:
            etl = f", {format_duration_ms(etl_ms)} ETL time"
            if duration_ms > 0:
                etl += f"({format_2dp(100.0 * etl_ms / duration_ms)} %)"

        LOGGER.info(
            "Epoch %d complete on iteration %d - %d batches (%d examples) in %s"
            " - %s batches/sec, %s examples/sec%s",
            at.epoch,
            at.iteration,
            batches,
            examples,
            format_duration_ms(duration_ms),
            format_2dp(batches_per_sec),
            format_2dp(examples_per_sec),
            etl,
        )

    def on_iteration_start(self, at: At, batch: Batch, etl_ms: float) -> None:
        with self._lock:
            self._window.last_iteration_start_ms = self._clock()
            self._window.etl_ms += etl_ms
            self._epoch.etl_ms += etl_ms

    def on_iteration_done(self, at: At, batch: Batch, loss: Loss) -> None:
        with self._lock:
            started_ms = self._window.last_iteration_start_ms
            if started_ms is not None:
                self._window.iteration_ms += self._clock() - started_ms
            self._epoch.batch_count += 1
            size = batch.batch_size()
            if size is not None:
                self._window.example_count += size
                self._epoch.example_count += size

            if at.iteration <= 0 or at.iteration % self.report_frequency != 0:
                return

            window = replace(self._window)
            self._window.reset()

        etl = ""
        if window.etl_ms > 0:
            etl = f"({format_duration_ms(window.etl_ms)} ETL"
            if self.report_frequency == 1:
                etl += ")"
            else:
                etl += f" in {self.report_frequency} iter)"

        LOGGER.info(
            "Loss at epoch %d, iteration %d: %s%s",
            at.epoch,
            at.iteration,
            format_5dp(loss.total_loss()),
            etl,
        )
        LOGGER.debug(
            "score_window epoch=%d iteration=%d iteration_time=%s examples=%d",
            at.epoch,
            at.iteration,
            format_duration_ms(window.iteration_ms),
            window.example_count,
        )


def create(
    report_frequency: int = 10,
    report_epochs: bool = True,
    *,
    clock: Clock | None = None,
) -> ScoreReporter:
    """Build a ScoreReporter, failing fast on a non-positive frequency."""
    return ScoreReporter(report_frequency, report_epochs, clock=clock)
