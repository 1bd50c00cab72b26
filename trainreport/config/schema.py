"""Typed configuration schema for training progress reporting."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ReporterConfig(BaseModel):
    """Score reporter cadence controls."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    report_frequency: int = Field(default=10, gt=0)
    report_epochs: bool = True


class LoggingConfig(BaseModel):
    """Root logger controls."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["color", "json"] = "color"
    use_tqdm: bool = False


class MonitorConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    reporter: ReporterConfig = Field(default_factory=ReporterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
