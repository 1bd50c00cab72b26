"""Formatting utilities."""

from trainreport.util.formatting import format_2dp, format_5dp, format_duration_ms

__all__ = ["format_2dp", "format_5dp", "format_duration_ms"]
