"""Wire configuration, logging and listeners together."""

from __future__ import annotations

import logging
from pathlib import Path

from trainreport.config.loader import load_monitor_config
from trainreport.config.schema import MonitorConfig
from trainreport.core.logging import configure_logging
from trainreport.listeners.group import ListenerGroup
from trainreport.listeners.score import Clock, ScoreReporter

LOGGER = logging.getLogger(__name__)


def setup_listeners_from_cfg(
    cfg: MonitorConfig,
    *,
    clock: Clock | None = None,
) -> ListenerGroup:
    """Configure logging and build the listener group for one config."""
    configure_logging(
        cfg.logging.level,
        cfg.logging.format,
        use_tqdm=cfg.logging.use_tqdm,
    )
    LOGGER.info(
        "reporter_selected report_frequency=%d report_epochs=%s",
        cfg.reporter.report_frequency,
        cfg.reporter.report_epochs,
    )
    return ListenerGroup([ScoreReporter.from_config(cfg.reporter, clock=clock)])


def setup_listeners(
    config_path: str | Path,
    *,
    clock: Clock | None = None,
) -> ListenerGroup:
    """Load a YAML config and build the listener group it describes."""
    cfg = load_monitor_config(config_path)
    listeners = setup_listeners_from_cfg(cfg, clock=clock)
    LOGGER.info("config_loaded path=%s", config_path)
    return listeners
