"""Listener setup from configuration."""

from trainreport.pipeline.runner import setup_listeners, setup_listeners_from_cfg

__all__ = ["setup_listeners", "setup_listeners_from_cfg"]
