"""Number and duration rendering for report lines."""

from __future__ import annotations

import math

_MS_PER_SECOND = 1_000
_MS_PER_MINUTE = 60_000
_MS_PER_HOUR = 3_600_000


def _scientific(value: float, digits: int) -> str:
    """Render `value` as `d.dddE<exp>` without exponent padding or plus sign."""
    mantissa, exponent = f"{value:.{digits}E}".split("E")
    return f"{mantissa}E{int(exponent)}"


def format_2dp(value: float) -> str:
    """Two decimals, or scientific notation below 0.01."""
    if not math.isfinite(value):
        return repr(float(value))
    if value < 0.01:
        return _scientific(value, 2)
    return f"{value:.2f}"


def format_5dp(value: float) -> str:
    """Five decimals, or scientific notation outside [1e-4, 1e4]."""
    if not math.isfinite(value):
        return repr(float(value))
    if value < 1e-4 or value > 1e4:
        return _scientific(value, 5)
    return f"{value:.5f}"


def format_duration_ms(ms: float) -> str:
    """Render a millisecond span in the coarsest readable unit."""
    if ms <= 100:
        return f"{int(ms)} ms"
    if ms <= _MS_PER_MINUTE:
        return f"{format_2dp(ms / _MS_PER_SECOND)} sec"
    if ms <= _MS_PER_HOUR:
        return f"{format_2dp(ms / _MS_PER_MINUTE)} min"
    return f"{format_2dp(ms / _MS_PER_HOUR)} hr"
