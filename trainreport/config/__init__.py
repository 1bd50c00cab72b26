"""Configuration models and loaders."""

from trainreport.config.loader import load_monitor_config
from trainreport.config.schema import LoggingConfig, MonitorConfig, ReporterConfig

__all__ = ["LoggingConfig", "MonitorConfig", "ReporterConfig", "load_monitor_config"]
