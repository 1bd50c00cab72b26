"""Logging formatters and root logger setup."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Literal

from colorama import Back, Fore, Style
from tqdm.auto import tqdm

LogFormat = Literal["color", "json"]


class JsonLogFormatter(logging.Formatter):
    """Minimal JSON formatter with deterministic field ordering."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True)


class ColorLogFormatter(logging.Formatter):
    """Human-readable formatter with one color per severity."""

    _LEVEL_COLORS: dict[int, str] = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW + Style.BRIGHT,
        logging.ERROR: Fore.RED + Style.BRIGHT,
        logging.CRITICAL: Fore.WHITE + Back.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self._LEVEL_COLORS.get(record.levelno, "")
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S"
        )
        line = " | ".join(
            (timestamp, f"{record.levelname:<8}", record.name, record.getMessage())
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return f"{color}{line}{Style.RESET_ALL}"


class TqdmLoggingHandler(logging.Handler):
    """Route records through tqdm so live progress bars stay intact."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record))
        except Exception:  # logging handlers report their own failures.
            self.handleError(record)


def _build_formatter(fmt: LogFormat) -> logging.Formatter:
    if fmt == "json":
        return JsonLogFormatter()
    if fmt == "color":
        return ColorLogFormatter()
    raise ValueError(f"Unsupported log format: {fmt}")


def configure_logging(
    level: str = "INFO",
    fmt: LogFormat = "color",
    *,
    use_tqdm: bool = False,
) -> None:
    """Configure root logging with a single handler."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())
    handler: logging.Handler
    if use_tqdm:
        handler = TqdmLoggingHandler()
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(fmt))
    root.addHandler(handler)
